import threading
from datetime import timedelta

import structlog

from sessionauth.config import Config
from sessionauth.core.core import Service
from sessionauth.core.modules.session import policy
from sessionauth.core.modules.session.models import Session, SessionId
from sessionauth.errors import NotFoundError, SessionExpiredError
from sessionauth.utils import Clock, generate_id, now

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """In-memory session table keyed by session id.

    Every operation runs under a single lock so read-then-write sequences
    (touch, rotate) are atomic with respect to each other.
    """

    def __init__(self, config: Config, clock: Clock = now) -> None:
        super().__init__(config, clock)
        self._sessions: dict[SessionId, Session] = {}
        self._lock = threading.Lock()

    @property
    def retention(self) -> timedelta:
        return timedelta(days=self.config.session_ttl_days)

    def create_session(self, owner_username: str, signed_token: str) -> Session:
        """Create and store a session for an authenticated user."""
        with self._lock:
            session_id = self._new_session_id()
            created_at = self.clock()
            session = Session(
                id=session_id,
                owner_username=owner_username,
                created_at=created_at,
                last_online=created_at,
                one_time=True,
                api_credential=self._new_api_credential(session_id),
                signed_token=signed_token,
            )
            self._sessions[session_id] = session
        logger.info("session_created", username=owner_username)
        return session

    def get_session(self, session_id: SessionId) -> Session:
        """Get session by id without liveness checks."""
        with self._lock:
            return self._get(session_id)

    def has_session(self, session_id: SessionId) -> bool:
        with self._lock:
            return session_id in self._sessions

    def count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def touch_session(self, session_id: SessionId) -> Session:
        """Refresh last_online without checking expiry."""
        with self._lock:
            session = policy.touched(self._get(session_id), self.clock())
            self._sessions[session_id] = session
            return session

    def validate_session(self, session_id: SessionId) -> Session:
        """Check the session is live and touch it.

        Raises:
            NotFoundError: Unknown session id
            SessionExpiredError: Session is past its retention window; it is left in place
        """
        with self._lock:
            session = self._get_live(session_id)
            session = policy.touched(session, self.clock())
            self._sessions[session_id] = session
            return session

    def rotate_api_credential(self, session_id: SessionId) -> Session:
        """Replace the API credential of a live session and touch it."""
        with self._lock:
            session = self._get_live(session_id)
            session = session.model_copy(
                update={"api_credential": self._new_api_credential(session_id, session.api_credential)}
            )
            session = policy.touched(session, self.clock())
            self._sessions[session_id] = session
        logger.info("api_credential_rotated", username=session.owner_username)
        return session

    def _get(self, session_id: SessionId) -> Session:
        session = self._sessions.get(session_id)
        if session is None:
            raise NotFoundError
        return session

    def _get_live(self, session_id: SessionId) -> Session:
        session = self._get(session_id)
        at = self.clock()
        if policy.is_expired(session, at, self.retention):
            logger.info("session_expired", username=session.owner_username, last_online=session.last_online)
            raise SessionExpiredError
        return session

    def _new_session_id(self) -> SessionId:
        # Caller holds the lock
        while True:
            session_id = SessionId(generate_id(self.config.id_size))
            if session_id not in self._sessions:
                return session_id

    def _new_api_credential(self, session_id: str, previous: str | None = None) -> str:
        while True:
            credential = generate_id(self.config.id_size)
            if credential not in (session_id, previous):
                return credential

    async def on_stop(self) -> None:
        logger.debug("session_service_stopped", session_count=self.count())
