from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog

from sessionauth.config import Config
from sessionauth.core.core import Core
from sessionauth.core.modules.session.models import Session, SessionId
from sessionauth.core.modules.token.models import Claims
from sessionauth.errors import AuthenticationError, InvalidTokenError, NotFoundError
from sessionauth.utils import Clock, now

logger = structlog.get_logger(__name__)


class App:
    """Facade for the authentication operations exposed to the HTTP layer."""

    def __init__(self, config: Config, clock: Clock = now) -> None:
        self._core = Core(config, clock)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    def authenticate(self, username: str, password: str) -> Session:
        """Check credentials, issue a signed token and open a session."""
        if not self._core.services.credential.verify(username, password):
            logger.info("authentication_failed", username=username)
            raise AuthenticationError
        signed_token = self._core.services.token.issue(username)
        return self._core.services.session.create_session(username, signed_token)

    def get_and_touch_session(self, session_id: SessionId) -> Session:
        """Return a live session, refreshing its last activity."""
        return self._core.services.session.validate_session(session_id)

    def validate_token(self, token: str | None, session_id: SessionId | None) -> Claims:
        """Verify a signed token and require a live session.

        The token's username is not compared with the session owner.
        """
        if not token:
            raise InvalidTokenError
        claims = self._core.services.token.verify(token)
        if not session_id:
            raise NotFoundError
        self._core.services.session.validate_session(session_id)
        return claims

    def rotate_api_credential(self, session_id: SessionId) -> Session:
        """Issue a new API credential for a live session."""
        return self._core.services.session.rotate_api_credential(session_id)
