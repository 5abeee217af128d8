"""A2UI protocol models and Claude <-> A2UI converters."""

from src.a2ui.converters import build_tools_from_catalog, convert_messages, convert_to_a2ui
from src.a2ui.models import A2uiEvent, BeginRendering, SurfaceUpdate, Widget

__all__ = [
    "A2uiEvent",
    "BeginRendering",
    "SurfaceUpdate",
    "Widget",
    "build_tools_from_catalog",
    "convert_messages",
    "convert_to_a2ui",
]
