from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from starlette.requests import HTTPConnection
from starlette.responses import Response

from timeline.config import Config
from timeline.core.core import Core
from timeline.core.modules.backend.models import Tweet
from timeline.core.modules.session.context import SessionContext
from timeline.core.modules.session.models import SessionUser
from timeline.errors import AuthenticationError, ValidationError


class App:
    """Facade for all application operations; session handling and backend relay."""

    def __init__(self, config: Config, backend_transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._core = Core(config, backend_transport)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    @property
    def core(self) -> Core:
        return self._core

    def session_context(self, connection: HTTPConnection) -> SessionContext:
        """Build the session view for one incoming request."""
        return SessionContext(self._core.store, connection.cookies)

    async def register(
        self, context: SessionContext, response: Response, username: str, email: str, password: str
    ) -> SessionUser:
        """Create an account on the backend and log the browser in."""
        result = await self._core.backend.register(username, email, password)
        context.create(response, result.user, result.token)
        return result.user

    async def login(self, context: SessionContext, response: Response, email: str, password: str) -> SessionUser:
        """Authenticate against the backend and create a session."""
        result = await self._core.backend.login(email, password)
        context.create(response, result.user, result.token)
        return result.user

    async def logout(self, context: SessionContext, response: Response) -> None:
        """End the session. Always succeeds, with or without a session."""
        context.destroy(response)

    def get_current_user(self, context: SessionContext) -> SessionUser:
        """Get the logged-in user or raise AuthenticationError."""
        user = context.get_current_user()
        if user is None:
            raise AuthenticationError("Login required")
        return user

    async def get_timeline(self, context: SessionContext) -> list[Tweet]:
        data = await self._core.backend.request("GET", "/api/timeline", bearer_token=self._require_token(context))
        return [Tweet.model_validate(item) for item in data or []]

    async def get_tweet(self, context: SessionContext, tweet_id: str) -> Tweet:
        data = await self._core.backend.request("GET", f"/api/tweets/{tweet_id}", bearer_token=self._require_token(context))
        return Tweet.model_validate(data)

    async def create_tweet(self, context: SessionContext, content: str) -> Tweet:
        if not content.strip():
            raise ValidationError("Tweet content cannot be empty")
        data = await self._core.backend.request(
            "POST", "/api/tweets", {"content": content}, bearer_token=self._require_token(context)
        )
        return Tweet.model_validate(data)

    async def delete_tweet(self, context: SessionContext, tweet_id: str) -> None:
        await self._core.backend.request("DELETE", f"/api/tweets/{tweet_id}", bearer_token=self._require_token(context))

    # === Private helpers ===
    def _require_token(self, context: SessionContext) -> str:
        """Bearer token of the current session. Raises AuthenticationError if there is none."""
        token = context.get_bearer_token()
        if token is None:
            raise AuthenticationError("Login required")
        return token
