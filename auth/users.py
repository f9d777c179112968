"""
auth/users.py -- User Store: credential records and identity resolution.

Pattern: Repository behind an abstract interface. AuthService depends on
UserStore only; InMemoryUserStore is the one implementation shipped today.
A persistent repository can be dropped in later by subclassing UserStore.

Concurrency:
  One ReadWriteLock guards the whole mapping. get_user_identity() takes it in
  shared mode; create_user() takes it exclusively and performs the existence
  check and the insert inside the same critical section, so two concurrent
  sign-ups for one username cannot both succeed.

Passwords are compared with plain equality. No hashing is applied and the
comparison is not constant-time; callers and tests rely on that behaviour.

Layer rule: no imports from api/. Import from core/ is allowed.
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod

from auth.exceptions import UsernameExistsError
from auth.models import CredentialRecord
from core.locks import ReadWriteLock

logger = logging.getLogger("authservice.auth")


class UserStore(ABC):
    """Interface for credential storage."""

    @abstractmethod
    def create_user(self, username: str, password: str) -> None:
        """Register a new user. Raises UsernameExistsError on a duplicate username."""

    @abstractmethod
    def get_user_identity(self, username: str, password: str) -> str | None:
        """Return the user's identity if the password matches, else None.

        "No such user" and "wrong password" are deliberately indistinguishable.
        """

    @abstractmethod
    def count(self) -> int:
        """Return the number of registered users."""

    def __len__(self) -> int:
        return self.count()


class InMemoryUserStore(UserStore):
    """Dict-backed UserStore, keyed by username.

    Usage:
        store = InMemoryUserStore()
        store.create_user("alice", "pw1")
        identity = store.get_user_identity("alice", "pw1")   # uuid string
        store.get_user_identity("alice", "wrong")            # None
    """

    def __init__(self) -> None:
        self._records: dict[str, CredentialRecord] = {}
        self._lock = ReadWriteLock()

    def create_user(self, username: str, password: str) -> None:
        with self._lock.write():
            if username in self._records:
                raise UsernameExistsError(username)
            self._records[username] = CredentialRecord(
                username=username,
                identity=str(uuid.uuid4()),
                password=password,
            )
            total = len(self._records)
        logger.debug("User registered (total=%d)", total)

    def get_user_identity(self, username: str, password: str) -> str | None:
        with self._lock.read():
            record = self._records.get(username)
        if record is None or record.password != password:
            return None
        return record.identity

    def count(self) -> int:
        with self._lock.read():
            return len(self._records)
