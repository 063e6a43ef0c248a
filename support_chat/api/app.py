"""FastAPI application factory.

Host application with lifespan logging and the health route. The chat
page itself is registered by NiceGUI when it is mounted onto this app.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from support_chat import __version__
from support_chat.chat.config import get_chat_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup and shutdown of the host application.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    config = get_chat_config()
    logger.info(f"Starting Support Chat, relaying to {config.endpoint_url}")
    yield
    logger.info("Shutting down Support Chat...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Support Chat",
        description=(
            "Single-page support chat. Forwards the conversation to a chat "
            "backend and renders the streamed assistant reply as it arrives."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "support-chat"}

    return application
