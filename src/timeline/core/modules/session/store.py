"""Cookie transport for encoded sessions."""

from collections.abc import Callable, Mapping
from datetime import UTC, datetime, timedelta

import structlog
from starlette.responses import Response

from timeline.core.modules.session.codec import SessionCodec
from timeline.core.modules.session.models import SessionRecord, SessionUser
from timeline.utils import now

logger = structlog.get_logger(__name__)

SESSION_COOKIE_NAME = "session"
SESSION_DURATION = timedelta(hours=24)


class SessionStore:
    """Creates, reads and deletes the single session cookie of a browser."""

    def __init__(self, codec: SessionCodec, secure: bool, clock: Callable[[], datetime] = now) -> None:
        self._codec = codec
        self._secure = secure
        self._clock = clock

    @property
    def codec(self) -> SessionCodec:
        return self._codec

    def create_session(self, response: Response, user: SessionUser, bearer_token: str) -> SessionRecord:
        """Encode a fresh 24h session and set it as the session cookie, replacing any previous one."""
        record = SessionRecord(user=user, bearer_token=bearer_token, expires_at=self._clock() + SESSION_DURATION)
        response.set_cookie(
            key=SESSION_COOKIE_NAME,
            value=self._codec.encode(record),
            expires=record.expires_at.astimezone(UTC),
            path="/",
            secure=self._secure,
            httponly=True,
            samesite="lax",
        )
        logger.info("session_created", user_id=user.id, expires_at=record.expires_at.isoformat())
        return record

    def read_session(self, cookies: Mapping[str, str]) -> SessionRecord | None:
        token = cookies.get(SESSION_COOKIE_NAME)
        if not token:
            return None
        return self._codec.decode(token)

    def destroy_session(self, response: Response) -> None:
        """Delete the session cookie. Safe to call when there is no session."""
        response.delete_cookie(
            key=SESSION_COOKIE_NAME,
            path="/",
            secure=self._secure,
            httponly=True,
            samesite="lax",
        )
        logger.info("session_destroyed")
