"""Session management models."""

from datetime import datetime
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field

SessionId = NewType("SessionId", str)


class Session(BaseModel):
    """Authenticated login held in memory.

    Records are immutable; the store replaces them on touch and rotation.
    `one_time` is set on creation and not consulted by any operation.
    """

    model_config = ConfigDict(frozen=True)

    id: SessionId
    owner_username: str
    created_at: datetime
    last_online: datetime
    one_time: bool = True
    api_credential: str
    signed_token: str


class SessionUser(BaseModel):
    name: str = Field(..., description="Username owning the session")


class SessionView(BaseModel):
    """Session as returned to API clients."""

    id: str = Field(..., description="Session ID")
    created_at: datetime = Field(..., description="Session creation time")
    last_online: datetime = Field(..., description="Last successful validation of this session")
    user: SessionUser
    one_time: bool
    api_hash: str = Field(..., description="Rotatable API credential")
    jwt_token: str = Field(..., description="Signed token issued at login")

    @classmethod
    def from_domain(cls, session: Session) -> "SessionView":
        """Create view model from domain model."""
        return cls(
            id=session.id,
            created_at=session.created_at,
            last_online=session.last_online,
            user=SessionUser(name=session.owner_username),
            one_time=session.one_time,
            api_hash=session.api_credential,
            jwt_token=session.signed_token,
        )
