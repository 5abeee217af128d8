"""Pydantic models for A2UI events sent to the UI client."""

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

MAIN_SURFACE_ID = "main"


class Widget(BaseModel):
    """Widget to render on a surface."""

    type: str = Field(..., description="Widget type (catalog item / tool name)")
    properties: dict[str, Any] = Field(default_factory=dict, description="Widget properties")


class SurfaceUpdate(BaseModel):
    """Update a surface with a widget requested by the model."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["surfaceUpdate"] = "surfaceUpdate"
    surface_id: str = Field(MAIN_SURFACE_ID, alias="surfaceId")
    widget: Widget


class BeginRendering(BaseModel):
    """Start rendering a surface with a default widget."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["beginRendering"] = "beginRendering"
    surface_id: str = Field(MAIN_SURFACE_ID, alias="surfaceId")
    widget: Widget


A2uiEvent = Union[SurfaceUpdate, BeginRendering]
