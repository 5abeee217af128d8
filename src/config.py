"""Configuration dataclass for the relay."""

from dataclasses import dataclass

PLACEHOLDER_API_KEY = "your-api-key-here"
DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_MAX_TOKENS = 4096


@dataclass(frozen=True)
class Config:
    """Application configuration.

    Built once at process start and passed to the app factory rather than
    reading from environment variables directly.
    """

    anthropic_api_key: str = PLACEHOLDER_API_KEY
    port: int = 8080
    host: str = "0.0.0.0"
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    log_level: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        """Whether a real API key was supplied."""
        return bool(self.anthropic_api_key) and self.anthropic_api_key != PLACEHOLDER_API_KEY
