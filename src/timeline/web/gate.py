"""Route gate: redirects requests based on path class and session cookie, ahead of routing."""

from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import urlencode

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from timeline.core.modules.session.codec import SessionCodec
from timeline.core.modules.session.store import SESSION_COOKIE_NAME

logger = structlog.get_logger(__name__)

LOGIN_PATH = "/login"
HOME_PATH = "/"
PUBLIC_ROUTES = (LOGIN_PATH, "/register")
# Backend proxy, static assets and framework-internal pages bypass the gate
EXCLUDED_PREFIXES = ("/api", "/static", "/docs", "/redoc", "/health")


class PathClass(StrEnum):
    PUBLIC = "public"
    PROTECTED = "protected"
    EXCLUDED = "excluded"


class GateAction(StrEnum):
    ALLOW = "allow"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class GateDecision:
    action: GateAction
    location: str | None = None

    @classmethod
    def allow(cls) -> "GateDecision":
        return cls(GateAction.ALLOW)

    @classmethod
    def redirect(cls, location: str) -> "GateDecision":
        return cls(GateAction.REDIRECT, location)


def _matches(path: str, route: str) -> bool:
    return path == route or path.startswith(f"{route}/")


def classify_path(path: str) -> PathClass:
    if "." in path.rsplit("/", 1)[-1] or any(_matches(path, prefix) for prefix in EXCLUDED_PREFIXES):
        return PathClass.EXCLUDED
    if any(_matches(path, route) for route in PUBLIC_ROUTES):
        return PathClass.PUBLIC
    return PathClass.PROTECTED


def login_location(path: str) -> str:
    """Login URL that brings the user back to `path` afterwards (the root needs no hint)."""
    if path == HOME_PATH:
        return LOGIN_PATH
    return f"{LOGIN_PATH}?{urlencode({'redirect': path})}"


def decide(path: str, authenticated: bool) -> GateDecision:
    path_class = classify_path(path)
    if path_class is PathClass.PROTECTED and not authenticated:
        return GateDecision.redirect(login_location(path))
    if path_class is PathClass.PUBLIC and authenticated:
        return GateDecision.redirect(HOME_PATH)
    return GateDecision.allow()


class RouteGateMiddleware(BaseHTTPMiddleware):
    """Applies `decide` to every request using only the session cookie.

    A cookie that is present but no longer decodes (tampered, expired, malformed)
    is deleted on the way out.
    """

    def __init__(self, app: ASGIApp, codec: SessionCodec, secure: bool) -> None:
        super().__init__(app)
        self._codec = codec
        self._secure = secure

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if classify_path(path) is PathClass.EXCLUDED:
            return await call_next(request)

        cookie = request.cookies.get(SESSION_COOKIE_NAME)
        authenticated = bool(cookie) and self._codec.decode(cookie) is not None

        decision = decide(path, authenticated)
        if decision.action is GateAction.REDIRECT:
            logger.info("gate_redirect", path=path, location=decision.location, authenticated=authenticated)
            # 307 keeps GET/HEAD as-is; other methods are switched to GET so the target page can answer
            status_code = 307 if request.method in ("GET", "HEAD") else 303
            response: Response = RedirectResponse(decision.location, status_code=status_code)
        else:
            response = await call_next(request)

        if cookie and not authenticated:
            response.delete_cookie(SESSION_COOKIE_NAME, path="/", secure=self._secure, httponly=True, samesite="lax")
        return response
