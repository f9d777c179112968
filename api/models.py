"""
API request and response models for the auth service RPC endpoints.

These Pydantic v2 models define the HTTP transport contract for the API layer.
They are intentionally separate from the dataclasses in auth/models.py, which
own the internal domain representation. Route handlers map between the two.

Separation of concerns: auth/ models = domain truth; api/ models = API contract.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from auth.models import AuthResult, StatusCode

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class SignUpRequest(BaseModel):
    """Request body for POST /api/v1/auth/sign-up.

    No length limits: any string is a valid username or password, and an
    oversized value is an ordinary (failing or succeeding) operation rather
    than a malformed request.
    """

    username: str
    password: str


class SignInRequest(BaseModel):
    """Request body for POST /api/v1/auth/sign-in."""

    username: str
    password: str


class SignOutRequest(BaseModel):
    """Request body for POST /api/v1/auth/sign-out.

    An empty token is valid input; sign-out treats it as a no-op.
    """

    token: str = ""


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class SignUpResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: StatusCode


class SignInResponse(BaseModel):
    """Response for POST /api/v1/auth/sign-in.

    identity and token are empty strings on failure.
    """

    model_config = ConfigDict(frozen=True)

    status: StatusCode
    identity: str = ""
    token: str = ""

    @classmethod
    def from_result(cls, result: AuthResult) -> "SignInResponse":
        """Build a SignInResponse from a domain AuthResult.

        Factory Method pattern -- the mapping lives here, colocated with the
        output model, rather than in the route handler.
        """
        return cls(status=result.status, identity=result.identity, token=result.token)


class SignOutResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: StatusCode


class ErrorDetail(BaseModel):
    """Machine-readable error payload."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: Optional[str] = None


class ErrorResponse(BaseModel):
    """Top-level error envelope returned on 4xx/5xx responses."""

    model_config = ConfigDict(frozen=True)

    error: ErrorDetail


class HealthResponse(BaseModel):
    """Response for GET /api/v1/health."""

    model_config = ConfigDict(frozen=True)

    status: str = "healthy"
    version: str
