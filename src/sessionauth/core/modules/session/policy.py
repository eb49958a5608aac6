"""Session lifetime rules.

Expiry is evaluated lazily on access. Expired sessions stay in the store and
are rejected by every validating operation.
"""

from datetime import datetime, timedelta

from sessionauth.core.modules.session.models import Session


def is_expired(session: Session, at: datetime, retention: timedelta) -> bool:
    """A session is live while at - last_online <= retention."""
    return at - session.last_online > retention


def touched(session: Session, at: datetime) -> Session:
    """Return a copy with last_online advanced to `at`, never moving it backwards."""
    return session.model_copy(update={"last_online": max(session.last_online, at)})
