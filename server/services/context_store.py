"""
Context Store.

Keyed store of ContextSession objects (session id -> initial context, active context,
behavioral signals). Sessions live in process memory; every write replaces the stored
session with the new model returned by advisor.tracking.
"""

import threading
import uuid
from typing import Callable, Dict, List, Optional

from advisor.models.session import ContextSession


class ContextStore:
    """Thread-safe in-memory session store."""

    def __init__(self):
        self._sessions: Dict[str, ContextSession] = {}
        self._lock = threading.Lock()

    def create(self, session_id: Optional[str] = None) -> ContextSession:
        """Create (or reset) a session and return it."""
        session_id = session_id or str(uuid.uuid4())[:8]
        session = ContextSession(session_id=session_id)
        with self._lock:
            self._sessions[session_id] = session
        return session

    def get(self, session_id: str) -> Optional[ContextSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def save(self, session: ContextSession) -> ContextSession:
        with self._lock:
            self._sessions[session.session_id] = session
        return session

    def update(
        self,
        session_id: str,
        fn: Callable[[ContextSession], ContextSession],
    ) -> Optional[ContextSession]:
        """Apply fn to the stored session under the lock. Returns None for unknown ids."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            updated = fn(session)
            self._sessions[session_id] = updated
            return updated

    def delete(self, session_id: str) -> bool:
        """Remove a session. Return True if it existed."""
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def list_ids(self) -> List[str]:
        with self._lock:
            return list(self._sessions)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
