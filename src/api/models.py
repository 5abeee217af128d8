"""Pydantic models for API requests and responses."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from src.a2ui.models import A2uiEvent


class GenerateRequest(BaseModel):
    """Generate request from the A2UI client.

    Fields are deliberately loose: wrong-shaped values are tolerated here and
    degrade to defaults in the converters.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    messages: Any = Field(None, description="Chat history: [{role, content | text}]")
    system_instruction: Any = Field(None, alias="systemInstruction", description="System prompt")
    catalog: Any = Field(None, description="Widget catalog: {items: [{name, description, schema}]}")


class GenerateResponse(BaseModel):
    """Successful generate response."""

    messages: list[A2uiEvent] = Field(..., description="A2UI events for the client")
    status: Literal["success"] = "success"


class ErrorResponse(BaseModel):
    """Failed generate response."""

    error: str = Field(..., description="Error message")
    status: Literal["error"] = "error"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    backend: str = "claude-a2ui"
