from datetime import timedelta
from typing import Any

import jwt
import pydantic
import structlog

from sessionauth.core.core import Service
from sessionauth.core.modules.token.models import Claims, SignedToken
from sessionauth.errors import InvalidTokenError, TokenSigningError

logger = structlog.get_logger(__name__)

ALGORITHM = "HS256"


class TokenService(Service):
    """Issues and verifies short-lived HMAC-signed tokens."""

    @property
    def _ttl(self) -> timedelta:
        return timedelta(seconds=self.config.token_ttl_seconds)

    def issue(self, username: str) -> SignedToken:
        """Sign a token asserting `username`, expiring token_ttl_seconds from now."""
        expires_at = self.clock() + self._ttl
        payload: dict[str, Any] = {"username": username, "exp": int(expires_at.timestamp())}
        try:
            return SignedToken(jwt.encode(payload, self.config.jwt_secret, algorithm=ALGORITHM))
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise TokenSigningError("Failed to sign token") from e

    def verify(self, token: str) -> Claims:
        """Check signature and expiry, return the claims.

        Expiry is compared against the service clock: the token is valid
        while now < exp. Every failure collapses to InvalidTokenError.
        """
        try:
            payload = jwt.decode(
                token,
                self.config.jwt_secret,
                algorithms=[ALGORITHM],
                options={"verify_exp": False, "require": ["exp"]},
            )
            claims = Claims.model_validate(payload)
        except (jwt.PyJWTError, pydantic.ValidationError) as e:
            logger.debug("token_rejected", reason=type(e).__name__)
            raise InvalidTokenError from e

        if int(self.clock().timestamp()) >= claims.exp:
            logger.debug("token_rejected", reason="expired")
            raise InvalidTokenError
        return claims
