from fastapi import APIRouter
from pydantic import BaseModel, Field

from timeline.core.modules.session.models import SessionUser
from timeline.web.deps import AppDep, SessionDep
from timeline.web.openapi import ErrorResponse

router = APIRouter(tags=["pages"])


class HomePage(BaseModel):
    user: SessionUser = Field(..., description="Logged-in user")


class ProfilePage(BaseModel):
    user_id: str = Field(..., description="ID of the profile being viewed")
    viewer: SessionUser = Field(..., description="Logged-in user")
    is_own_profile: bool = Field(..., description="Whether the viewer is looking at their own profile")


@router.get(
    "/",
    summary="Home",
    operation_id="homePage",
    responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)
async def home(app: AppDep, session: SessionDep) -> HomePage:
    return HomePage(user=app.get_current_user(session))


@router.get(
    "/profile/{user_id}",
    summary="Profile",
    operation_id="profilePage",
    responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)
async def profile(user_id: str, app: AppDep, session: SessionDep) -> ProfilePage:
    viewer = app.get_current_user(session)
    return ProfilePage(user_id=user_id, viewer=viewer, is_own_profile=viewer.id == user_id)
