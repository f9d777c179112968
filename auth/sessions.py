"""
auth/sessions.py -- Session Store: opaque bearer tokens mapped to identities.

Tokens are UUID4 strings (122 random bits). Collisions are practically
impossible, so create_session() inserts without a uniqueness retry loop.
Sessions never expire; they live until delete_session() is called.

Same locking discipline as auth/users.py: one ReadWriteLock per store,
shared for lookups, exclusive for inserts and deletes.

Layer rule: no imports from api/. Import from core/ is allowed.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from auth.models import Session
from core.locks import ReadWriteLock


class SessionStore(ABC):
    """Interface for session storage."""

    @abstractmethod
    def create_session(self, identity: str) -> str:
        """Create a session for identity and return its new token."""

    @abstractmethod
    def delete_session(self, token: str) -> None:
        """Remove the session for token. Unknown or empty tokens are a no-op."""

    @abstractmethod
    def get_session_identity(self, token: str) -> str | None:
        """Return the identity behind a live token, or None."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of live sessions."""

    def __len__(self) -> int:
        return self.count()


class InMemorySessionStore(SessionStore):
    """Dict-backed SessionStore, keyed by token.

    One identity may hold any number of sessions at once; each sign-in gets
    its own independent token.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._lock = ReadWriteLock()

    def create_session(self, identity: str) -> str:
        token = str(uuid.uuid4())
        with self._lock.write():
            self._sessions[token] = Session(token=token, identity=identity)
        return token

    def delete_session(self, token: str) -> None:
        with self._lock.write():
            self._sessions.pop(token, None)

    def get_session_identity(self, token: str) -> str | None:
        with self._lock.read():
            session = self._sessions.get(token)
        return session.identity if session is not None else None

    def count(self) -> int:
        with self._lock.read():
            return len(self._sessions)
