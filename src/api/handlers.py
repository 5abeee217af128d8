"""API request handlers."""

import json
import logging

from anthropic import AsyncAnthropic
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from src.a2ui.converters import build_tools_from_catalog, convert_messages, convert_to_a2ui
from src.api.models import ErrorResponse, GenerateRequest, GenerateResponse, HealthResponse
from src.claude import create_message
from src.config import Config

logger = logging.getLogger(__name__)

MAX_BODY_BYTES = 10 * 1024 * 1024


def create_health_handler():
    """Create health check handler."""

    async def health() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse()

    return health


async def _read_body(http_request: Request) -> bytes:
    content_length = http_request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > MAX_BODY_BYTES:
        raise HTTPException(status_code=413, detail="Request body too large")

    body = await http_request.body()
    if len(body) > MAX_BODY_BYTES:
        raise HTTPException(status_code=413, detail="Request body too large")
    return body


def create_generate_handler(client: AsyncAnthropic, config: Config):
    """Create generate handler with Claude client dependency.

    Args:
        client: Anthropic client shared by all requests
        config: Application configuration

    Returns:
        Generate handler function
    """

    async def generate(http_request: Request) -> JSONResponse:
        """Translate an A2UI request into a Claude call and back into A2UI events."""
        body = await _read_body(http_request)

        try:
            request = GenerateRequest.model_validate(json.loads(body) if body else {})

            received = len(request.messages) if isinstance(request.messages, list) else 0
            logger.info(f"Received request with {received} messages")

            messages = convert_messages(request.messages)

            tools = build_tools_from_catalog(request.catalog)

            response = await create_message(
                client,
                config,
                system_instruction=request.system_instruction,
                messages=messages,
                tools=tools,
            )

            events = convert_to_a2ui(response)
        except Exception as e:
            logger.exception(f"Error generating A2UI response: {e}")
            return JSONResponse(
                status_code=500,
                content=ErrorResponse(error=str(e)).model_dump(),
            )

        return JSONResponse(
            content=GenerateResponse(messages=events).model_dump(mode="json", by_alias=True),
        )

    return generate
