"""Session data models."""

from datetime import datetime
from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, StrictInt, StrictStr

TOKEN_VERSION = 1


class SessionUser(BaseModel):
    """Identity subset of the logged-in user, as issued by the backend."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: StrictStr = Field(..., min_length=1, description="User ID")
    username: StrictStr = Field(..., description="Username")
    email: StrictStr = Field(..., description="Email address")


class SessionRecord(BaseModel):
    """Authoritative session state for one logged-in browser."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    user: SessionUser
    bearer_token: str = Field(..., min_length=1)
    expires_at: AwareDatetime

    def is_expired(self, at: datetime) -> bool:
        """A session is invalid at or after its expiry instant."""
        return at >= self.expires_at


class TokenClaims(BaseModel):
    """Exact claim set carried inside a signed session token.

    Tokens whose decoded claims differ from this shape in any way are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    v: StrictInt = Field(ge=TOKEN_VERSION, le=TOKEN_VERSION)
    user: SessionUser
    bearer_token: StrictStr = Field(..., min_length=1)
    expires_at: AwareDatetime
    iat: StrictInt
    exp: StrictInt

    def to_record(self) -> SessionRecord:
        return SessionRecord(user=self.user, bearer_token=self.bearer_token, expires_at=self.expires_at)
