"""Conversions between A2UI requests, the Claude Messages API and A2UI events.

All functions here are total: malformed input degrades to empty collections
or defaults instead of raising.
"""

import logging
from typing import Any

from src.a2ui.models import A2uiEvent, BeginRendering, SurfaceUpdate, Widget

logger = logging.getLogger(__name__)

CHAT_ROLES = ("user", "assistant")

DEFAULT_TOOL_NAME = "widget"
DEFAULT_TOOL_DESCRIPTION = "Create a Flutter widget"

FALLBACK_WIDGET_TYPE = "Text"
FALLBACK_MESSAGE = "Received response from Claude"


def _default_input_schema() -> dict[str, Any]:
    return {"type": "object", "properties": {}}


def convert_messages(messages: Any) -> list[dict[str, Any]]:
    """Convert A2UI chat messages to Claude messages.

    Entries with a role other than user/assistant are dropped. Content falls
    back to the legacy ``text`` field, then to an empty string.
    """
    if not isinstance(messages, list):
        return []

    converted = []
    for msg in messages:
        if not isinstance(msg, dict):
            continue
        role = msg.get("role")
        if role not in CHAT_ROLES:
            continue
        converted.append({"role": role, "content": msg.get("content") or msg.get("text") or ""})
    return converted


def build_tools_from_catalog(catalog: Any) -> list[dict[str, Any]]:
    """Build Claude tool definitions from an A2UI widget catalog.

    Each catalog item becomes one tool, in order. Schemas are passed through
    without validation.
    """
    if not isinstance(catalog, dict):
        return []
    items = catalog.get("items")
    if not isinstance(items, list):
        return []

    tools = []
    for item in items:
        if not isinstance(item, dict):
            item = {}
        tools.append(
            {
                "name": item.get("name") or DEFAULT_TOOL_NAME,
                "description": item.get("description") or DEFAULT_TOOL_DESCRIPTION,
                "input_schema": item.get("schema") or item.get("inputSchema") or _default_input_schema(),
            }
        )
    return tools


def convert_to_a2ui(response: Any) -> list[A2uiEvent]:
    """Convert a Claude reply to A2UI events.

    Every tool_use block becomes a surfaceUpdate on the main surface. Text
    blocks are only logged. A reply without tool calls yields a single
    beginRendering fallback, so the result is never empty.
    """
    events: list[A2uiEvent] = []

    for block in getattr(response, "content", None) or []:
        block_type = getattr(block, "type", None)
        if block_type == "tool_use":
            events.append(SurfaceUpdate(widget=Widget(type=block.name, properties=block.input)))
        elif block_type == "text":
            logger.debug(f"Claude text: {block.text}")

    if not events:
        events.append(
            BeginRendering(
                widget=Widget(type=FALLBACK_WIDGET_TYPE, properties={"data": FALLBACK_MESSAGE}),
            )
        )

    return events
