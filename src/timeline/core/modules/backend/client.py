from typing import Any

import httpx
import pydantic
import structlog

from timeline.core.modules.backend.models import AuthResult
from timeline.errors import BackendError, BackendUnavailableError, CredentialsError

logger = structlog.get_logger(__name__)


class BackendClient:
    """JSON client for the timeline backend API.

    Holds no credentials of its own: authenticated calls take the bearer token
    of the current session as an argument.
    """

    def __init__(self, base_url: str, timeout: float | None = None, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._client = httpx.AsyncClient(base_url=base_url.rstrip("/"), timeout=timeout, transport=transport)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def register(self, username: str, email: str, password: str) -> AuthResult:
        """Create an account. Raises CredentialsError with the backend's message on rejection."""
        return await self._authenticate("/api/register", {"username": username, "email": email, "password": password})

    async def login(self, email: str, password: str) -> AuthResult:
        """Exchange credentials for a bearer token. Raises CredentialsError with the backend's message on rejection."""
        return await self._authenticate("/api/login", {"email": email, "password": password})

    async def request(
        self, method: str, endpoint: str, body: Any = None, bearer_token: str | None = None
    ) -> Any:
        """Send a JSON request, returning the decoded body (None for 204 No Content)."""
        headers = {"Content-Type": "application/json"}
        if bearer_token:
            headers["Authorization"] = f"Bearer {bearer_token}"

        try:
            response = await self._client.request(method, endpoint, json=body, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("backend_unreachable", method=method, endpoint=endpoint, error=str(e))
            raise BackendUnavailableError from e

        if response.is_error:
            raise BackendError(_error_message(response), response.status_code)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.warning("backend_invalid_response", method=method, endpoint=endpoint, status=response.status_code)
            raise BackendUnavailableError from e

    async def _authenticate(self, endpoint: str, body: dict[str, str]) -> AuthResult:
        try:
            data = await self.request("POST", endpoint, body)
        except BackendError as e:
            if e.status_code >= 500:
                raise BackendUnavailableError from e
            raise CredentialsError(str(e)) from e

        try:
            return AuthResult.model_validate(data)
        except pydantic.ValidationError as e:
            logger.warning("backend_invalid_auth_response", endpoint=endpoint, errors=e.error_count())
            raise BackendUnavailableError from e


def _error_message(response: httpx.Response) -> str:
    """Backend errors carry a human-readable message in the "error" field."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"]:
        return data["error"]
    return f"HTTP {response.status_code}"
