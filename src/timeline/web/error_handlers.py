import structlog
from fastapi import Request
from fastapi.responses import JSONResponse, Response

from timeline.errors import (
    AuthenticationError,
    BackendError,
    BackendUnavailableError,
    CredentialsError,
    ValidationError,
)

logger = structlog.get_logger(__name__)


def create_json_error_response(status_code: int, message: str, error_type: str | None = None) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"message": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    if isinstance(exc, AuthenticationError):
        status_code = 401
        error_type = "authentication_error"
    elif isinstance(exc, CredentialsError):
        status_code = 400
        error_type = "credentials_error"
    elif isinstance(exc, BackendUnavailableError):
        status_code = 503
        error_type = "backend_unavailable"
    elif isinstance(exc, BackendError):
        # Relay client errors (e.g. 404, 403) as-is; anything else is a bad gateway
        status_code = exc.status_code if 400 <= exc.status_code < 500 else 502
        error_type = "backend_error"
    elif isinstance(exc, ValidationError):
        status_code = 400
        error_type = "validation_error"
    else:
        # Default for any other UserError subclass
        status_code = 400
        error_type = "bad_request"

    return create_json_error_response(status_code=status_code, message=str(exc), error_type=error_type)


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("unexpected_error", error=str(exc))
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )
