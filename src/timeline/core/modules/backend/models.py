from pydantic import BaseModel, Field

from timeline.core.modules.session.models import SessionUser


class AuthResult(BaseModel):
    """Successful response of the backend's login and register endpoints."""

    token: str = Field(..., min_length=1, description="Bearer token for calls on the user's behalf")
    user: SessionUser


class Tweet(BaseModel):
    """Tweet as returned by the backend."""

    id: str
    user_id: str
    content: str
    created_at: str
