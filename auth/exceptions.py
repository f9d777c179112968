"""
auth/exceptions.py -- Store-level errors.

These never cross the transport boundary: AuthService catches them and turns
them into a failure status.
"""


class AuthStoreError(Exception):
    """Base class for errors raised by a user or session store."""


class UsernameExistsError(AuthStoreError):
    """Raised by UserStore.create_user() when the username is already taken."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username already exists: {username!r}")
        self.username = username
