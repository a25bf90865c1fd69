from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
import structlog

from timeline.config import Config
from timeline.core.modules.backend.client import BackendClient
from timeline.core.modules.session.codec import SessionCodec
from timeline.core.modules.session.store import SessionStore

logger = structlog.get_logger(__name__)


class Core:
    """Container providing config, the session components and the backend client."""

    config: Config
    codec: SessionCodec
    store: SessionStore
    backend: BackendClient

    def __init__(self, config: Config, backend_transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Initialize core from config. A custom transport replaces the network for the backend client."""
        self.config = config
        self.codec = SessionCodec(config.session_secret)
        self.store = SessionStore(self.codec, secure=config.production)
        self.backend = BackendClient(config.backend_url, timeout=config.backend_timeout, transport=backend_transport)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        if self.config.uses_default_secret:
            logger.warning(
                "default_session_secret",
                detail="TIMELINE_SESSION_SECRET is not set; session tokens are signed with the built-in default key",
            )

    async def on_stop(self) -> None:
        """Close backend connections on shutdown."""
        await self.backend.aclose()
