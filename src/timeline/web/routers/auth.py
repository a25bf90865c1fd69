from fastapi import APIRouter, Query
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from timeline.utils import is_local_path
from timeline.web.deps import AppDep, SessionDep
from timeline.web.gate import HOME_PATH, LOGIN_PATH
from timeline.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    """Login form."""

    email: str = Field(..., min_length=1, description="Email address")
    password: str = Field(..., min_length=1, description="Password")


class RegisterRequest(BaseModel):
    """Registration form."""

    username: str = Field(..., min_length=1, description="Username")
    email: str = Field(..., min_length=1, description="Email address")
    password: str = Field(..., min_length=1, description="Password")


class AuthPage(BaseModel):
    """Public page shown to anonymous visitors."""

    page: str = Field(..., description="Page identifier")
    redirect: str | None = Field(None, description="Where to go after a successful login")


def _post_login_target(redirect: str | None) -> str:
    if redirect and is_local_path(redirect):
        return redirect
    return HOME_PATH


@router.get("/login", summary="Login page", operation_id="loginPage")
async def login_page(redirect: str | None = Query(None, description="Path to return to after login")) -> AuthPage:
    return AuthPage(page="login", redirect=redirect if redirect and is_local_path(redirect) else None)


@router.post(
    "/login",
    summary="Log in",
    description="Authenticate with the backend and set the session cookie.",
    operation_id="login",
    status_code=303,
    responses={
        303: {"description": "Logged in; redirect to the requested page or home"},
        400: {"model": ErrorResponse, "description": "Credentials rejected by the backend"},
        503: {"model": ErrorResponse, "description": "Backend unavailable"},
    },
)
async def login(
    login_data: LoginRequest,
    app: AppDep,
    session: SessionDep,
    redirect: str | None = Query(None, description="Path to return to after login"),
) -> RedirectResponse:
    response = RedirectResponse(_post_login_target(redirect), status_code=303)
    await app.login(session, response, login_data.email, login_data.password)
    return response


@router.get("/register", summary="Registration page", operation_id="registerPage")
async def register_page() -> AuthPage:
    return AuthPage(page="register")


@router.post(
    "/register",
    summary="Create account",
    description="Register with the backend, then log in with the new account.",
    operation_id="register",
    status_code=303,
    responses={
        303: {"description": "Registered and logged in; redirect home"},
        400: {"model": ErrorResponse, "description": "Registration rejected by the backend"},
        503: {"model": ErrorResponse, "description": "Backend unavailable"},
    },
)
async def register(register_data: RegisterRequest, app: AppDep, session: SessionDep) -> RedirectResponse:
    response = RedirectResponse(HOME_PATH, status_code=303)
    await app.register(session, response, register_data.username, register_data.email, register_data.password)
    return response


@router.post(
    "/logout",
    summary="Log out",
    description="Delete the session cookie and go to the login page.",
    operation_id="logout",
    status_code=303,
    responses={303: {"description": "Logged out"}},
)
async def logout(app: AppDep, session: SessionDep) -> RedirectResponse:
    response = RedirectResponse(LOGIN_PATH, status_code=303)
    await app.logout(session, response)
    return response
