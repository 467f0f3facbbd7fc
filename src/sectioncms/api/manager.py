import logging
import threading
import uuid

from ..session import FormSession

logger = logging.getLogger(__name__)


class SessionManager:
    """In-memory registry of open form sessions."""

    def __init__(self) -> None:
        self._sessions: dict[str, FormSession] = {}
        self._lock = threading.Lock()

    def open(self, session: FormSession) -> str:
        session_id = uuid.uuid4().hex
        with self._lock:
            self._sessions[session_id] = session
        logger.info(f"Opened session {session_id} for {session.type_id}")
        return session_id

    def get(self, session_id: str) -> FormSession | None:
        with self._lock:
            return self._sessions.get(session_id)

    def close(self, session_id: str) -> bool:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is not None:
            logger.info(f"Closed session {session_id}")
        return session is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
