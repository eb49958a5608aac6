import hmac
from types import MappingProxyType

import structlog

from sessionauth.config import Config
from sessionauth.core.core import Service
from sessionauth.utils import Clock, now

logger = structlog.get_logger(__name__)

# Compared against when the username is unknown, so both failure paths do the same work
_DUMMY_PASSWORD = "sessionauth-timing-dummy"  # noqa: S105


class CredentialService(Service):
    """Read-only username -> password table, fixed at startup."""

    def __init__(self, config: Config, clock: Clock = now) -> None:
        super().__init__(config, clock)
        self._passwords: MappingProxyType[str, str] = MappingProxyType(dict(config.users))

    def lookup(self, username: str) -> str | None:
        """Return the expected password for a user, or None if unknown."""
        return self._passwords.get(username)

    def verify(self, username: str, password: str) -> bool:
        """Check a username/password pair.

        Plain equality against the configured value, done in constant time.
        Unknown user and wrong password are indistinguishable to the caller.
        """
        expected = self.lookup(username)
        if expected is None:
            hmac.compare_digest(password.encode("utf-8"), _DUMMY_PASSWORD.encode("utf-8"))
            return False
        return hmac.compare_digest(password.encode("utf-8"), expected.encode("utf-8"))

    async def on_start(self) -> None:
        logger.debug("credential_service_started", user_count=len(self._passwords))
