from collections.abc import Mapping

from starlette.responses import Response

from timeline.core.modules.session.models import SessionRecord, SessionUser
from timeline.core.modules.session.store import SessionStore

_UNRESOLVED = object()


class SessionContext:
    """Per-request view of the session.

    Built once per incoming request and passed to whatever needs the current
    user. The cookie is decoded on first access only, so every reader within
    the request sees the same answer. Writes go through the store and replace
    the cached value.
    """

    def __init__(self, store: SessionStore, cookies: Mapping[str, str]) -> None:
        self._store = store
        self._cookies = cookies
        self._session: SessionRecord | None | object = _UNRESOLVED

    def get_current_session(self) -> SessionRecord | None:
        if self._session is _UNRESOLVED:
            self._session = self._store.read_session(self._cookies)
        return self._session  # type: ignore[return-value]

    def get_current_user(self) -> SessionUser | None:
        session = self.get_current_session()
        return session.user if session else None

    def get_bearer_token(self) -> str | None:
        """Backend credential of the current user, for outbound API calls only."""
        session = self.get_current_session()
        return session.bearer_token if session else None

    @property
    def is_authenticated(self) -> bool:
        return self.get_current_session() is not None

    def create(self, response: Response, user: SessionUser, bearer_token: str) -> SessionRecord:
        self._session = self._store.create_session(response, user, bearer_token)
        return self._session

    def destroy(self, response: Response) -> None:
        self._store.destroy_session(response)
        self._session = None
