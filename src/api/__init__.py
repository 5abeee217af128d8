"""API module for request/response models and handlers."""

from src.api.models import ErrorResponse, GenerateRequest, GenerateResponse, HealthResponse
from src.api.handlers import create_generate_handler, create_health_handler

__all__ = [
    "ErrorResponse",
    "GenerateRequest",
    "GenerateResponse",
    "HealthResponse",
    "create_generate_handler",
    "create_health_handler",
]
