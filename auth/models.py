"""
auth/models.py -- Domain dataclasses for authentication entities.

Pattern: Data class (pure data container, zero logic). Dataclasses own domain
shape; stores and the service do the work. The API layer maps these onto its
own Pydantic request/response models.

Layer rule: no imports from api/ or core/.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StatusCode(str, Enum):
    """Outcome of a single auth operation.

    The string values are the wire values; `number` mirrors the integer
    enumeration used by RPC clients that speak the numeric form.
    """

    success = "success"
    failure = "failure"

    @property
    def number(self) -> int:
        return 0 if self is StatusCode.success else 1

    @classmethod
    def parse(cls, value: object) -> "StatusCode":
        """Map a wire value (name or number) to a StatusCode.

        Anything unrecognized is treated as failure so a caller never reports
        success for a response it could not read.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.success if value == 0 else cls.failure
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.failure


@dataclass(frozen=True)
class CredentialRecord:
    """A registered user.

    identity is a UUID4 string assigned at sign-up, independent of username.
    password is compared by plain equality -- no hashing is applied.
    """

    username: str
    identity: str
    password: str


@dataclass(frozen=True)
class Session:
    token: str
    identity: str


@dataclass(frozen=True)
class AuthResult:
    """Uniform response shape for sign-up, sign-in and sign-out.

    identity and token are empty strings whenever the operation did not
    produce them (every failure, and every sign-up/sign-out).
    """

    status: StatusCode
    identity: str = ""
    token: str = ""

    @property
    def ok(self) -> bool:
        return self.status is StatusCode.success

    @classmethod
    def success(cls, identity: str = "", token: str = "") -> "AuthResult":
        return cls(status=StatusCode.success, identity=identity, token=token)

    @classmethod
    def failure(cls) -> "AuthResult":
        return cls(status=StatusCode.failure)
