"""Signed token claims."""

from typing import NewType

from pydantic import BaseModel, Field

SignedToken = NewType("SignedToken", str)


class Claims(BaseModel):
    """Identity asserted by a signed token, valid until `exp` (unix seconds)."""

    username: str = Field(..., description="Authenticated username")
    exp: int = Field(..., description="Expiration time as a unix timestamp")
