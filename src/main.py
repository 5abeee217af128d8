"""FastAPI application entry point."""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from anthropic import AsyncAnthropic
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.handlers import create_generate_handler, create_health_handler
from src.claude import create_client
from src.config import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, PLACEHOLDER_API_KEY, Config

logger = logging.getLogger(__name__)

# Load .env file if it exists (for local development)
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


def load_config() -> Config:
    """Load configuration from environment variables.

    This is the only place that reads from environment variables. A missing
    API key is not an error here: requests fail at the Claude call instead.
    """
    return Config(
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or PLACEHOLDER_API_KEY,
        port=int(os.getenv("PORT", "8080")),
        host=os.getenv("HOST", "0.0.0.0"),
        model=os.getenv("CLAUDE_MODEL", DEFAULT_MODEL),
        max_tokens=int(os.getenv("CLAUDE_MAX_TOKENS", str(DEFAULT_MAX_TOKENS))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(config: Config) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(config: Config, client: AsyncAnthropic | None = None) -> FastAPI:
    """Create the relay application.

    Args:
        config: Application configuration
        client: Anthropic client; built from config when not given

    Returns:
        Configured FastAPI app
    """
    if client is None:
        client = create_client(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup/shutdown."""
        logger.info(f"A2UI Server running on http://localhost:{config.port}")
        logger.info(f"Health check: http://localhost:{config.port}/health")
        if not config.has_api_key:
            logger.warning("ANTHROPIC_API_KEY is not set; Claude calls will fail")
        yield
        logger.info("Shutting down A2UI Server...")

    app = FastAPI(
        title="Claude A2UI Relay",
        description="Bridges A2UI clients with Claude tool calling",
        lifespan=lifespan,
    )

    # CORS middleware for UI clients on any origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    app.get("/health")(create_health_handler())
    app.post("/generate")(create_generate_handler(client, config))

    return app


# Load configuration
config = load_config()
configure_logging(config)

app = create_app(config)


def main():
    """Run the FastAPI server."""
    import uvicorn

    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
