"""
api/routes/v1/auth.py -- Sign-up, sign-in and sign-out remote procedures.

Routes:
  POST /api/v1/auth/sign-up   -- register a username/password pair
  POST /api/v1/auth/sign-in   -- authenticate; returns identity + session token
  POST /api/v1/auth/sign-out  -- revoke a session token (always succeeds)

Contract:
  Every call that passes body validation answers HTTP 200. Success or failure
  of the operation itself is carried in the `status` field, never in the HTTP
  status code -- a duplicate username or a bad password is a normal outcome,
  not a transport fault.

  Handlers are plain `def` so FastAPI runs them in its worker thread pool;
  the stores synchronise with thread locks (core/locks.py).

Security:
  Sign-in returns the same failure shape for an unknown username and a wrong
  password. Cache-Control: no-store is set on sign-in responses because they
  may carry a bearer token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from api.models import (
    SignInRequest,
    SignInResponse,
    SignOutRequest,
    SignOutResponse,
    SignUpRequest,
    SignUpResponse,
)
from auth.dependencies import get_auth_service
from auth.service import AuthService

# Auth policy: all three routes are public -- they are the authentication
# entry points, so there is nothing to authenticate against yet.
router = APIRouter()


@router.post("/auth/sign-up", response_model=SignUpResponse)
def sign_up(body: SignUpRequest, service: AuthService = Depends(get_auth_service)) -> SignUpResponse:
    """Register a new user. Fails if the username is already taken.

    Sign-up does not sign the user in; no identity or token is returned.
    """
    result = service.sign_up(body.username, body.password)
    return SignUpResponse(status=result.status)


@router.post("/auth/sign-in", response_model=SignInResponse)
def sign_in(
    body: SignInRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service),
) -> SignInResponse:
    """Authenticate with username and password and open a new session.

    On failure identity and token are empty strings, whatever the reason.
    """
    result = service.sign_in(body.username, body.password)
    response.headers["Cache-Control"] = "no-store"
    return SignInResponse.from_result(result)


@router.post("/auth/sign-out", response_model=SignOutResponse)
def sign_out(body: SignOutRequest, service: AuthService = Depends(get_auth_service)) -> SignOutResponse:
    """Revoke a session token. Unknown and empty tokens are accepted silently."""
    result = service.sign_out(body.token)
    return SignOutResponse(status=result.status)
