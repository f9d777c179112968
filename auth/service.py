"""
auth/service.py -- AuthService: sequences store calls per request.

Pattern: Service layer / orchestrator. AuthService is stateless between
requests and holds references (not ownership) to the two stores, which are
shared by every concurrent request. Each store call takes and releases its
own store's lock; no lock is ever held across both stores, so there is no
lock-ordering concern.

Error policy:
  Store errors are fully recovered here and turned into StatusCode.failure.
  Nothing raised by a store reaches the transport layer. Sign-in failure
  never says whether the username or the password was wrong -- not in the
  result and not in the log line.

Layer rule: no imports from api/.
"""

from __future__ import annotations

import logging

from auth.exceptions import AuthStoreError
from auth.models import AuthResult
from auth.sessions import SessionStore
from auth.users import UserStore

logger = logging.getLogger("authservice.auth")


class AuthService:
    """Sign-up, sign-in and sign-out over a UserStore and a SessionStore.

    Usage:
        service = AuthService(InMemoryUserStore(), InMemorySessionStore())
        service.sign_up("alice", "pw1")                 # success
        result = service.sign_in("alice", "pw1")        # success, identity + token
        service.sign_out(result.token)                  # success
    """

    def __init__(self, user_store: UserStore, session_store: SessionStore) -> None:
        self.user_store = user_store
        self.session_store = session_store

    def sign_up(self, username: str, password: str) -> AuthResult:
        """Register a user. Does not sign the user in."""
        try:
            self.user_store.create_user(username, password)
        except AuthStoreError as exc:
            logger.info("Sign-up rejected: %s", type(exc).__name__)
            return AuthResult.failure()
        logger.info("Sign-up succeeded")
        return AuthResult.success()

    def sign_in(self, username: str, password: str) -> AuthResult:
        """Authenticate and open a new session.

        The session store is only touched after the user store has returned an
        identity: a failed authentication must never create a session.
        """
        identity = self.user_store.get_user_identity(username, password)
        if identity is None:
            logger.info("Sign-in failed")
            return AuthResult.failure()

        token = self.session_store.create_session(identity)
        logger.info("Sign-in succeeded for identity %s", identity)
        return AuthResult.success(identity=identity, token=token)

    def sign_out(self, token: str) -> AuthResult:
        """End a session. Always succeeds, whether or not the token was live."""
        self.session_store.delete_session(token)
        logger.info("Sign-out processed")
        return AuthResult.success()
