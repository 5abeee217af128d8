"""Anthropic client for the Claude Messages API."""

import logging
from typing import Any

from anthropic import AsyncAnthropic
from anthropic.types import Message

from src.config import Config

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."


def create_client(config: Config) -> AsyncAnthropic:
    """Create the Anthropic client used for every request.

    The relay never retries: a failed call surfaces to the caller as-is.

    Args:
        config: Application configuration

    Returns:
        Configured async Anthropic client
    """
    return AsyncAnthropic(api_key=config.anthropic_api_key, max_retries=0)


async def create_message(
    client: AsyncAnthropic,
    config: Config,
    *,
    system_instruction: Any,
    messages: list[dict[str, str]],
    tools: list[dict[str, Any]],
) -> Message:
    """Send one tool-calling request to Claude.

    Args:
        client: Anthropic client
        config: Application configuration (model and max tokens)
        system_instruction: System prompt from the client; falls back to
            DEFAULT_SYSTEM_PROMPT when empty
        messages: Converted chat messages
        tools: Tool definitions built from the widget catalog

    Returns:
        Claude's reply message
    """
    response = await client.messages.create(
        model=config.model,
        max_tokens=config.max_tokens,
        system=system_instruction or DEFAULT_SYSTEM_PROMPT,
        messages=messages,
        tools=tools,
    )
    logger.info(f"Claude responded: {response.stop_reason}")
    return response
