"""
auth/dependencies.py -- FastAPI Depends() helpers for the auth service.

The AuthService and both stores are created once in the app lifespan and
attached to app.state. Route handlers receive them through these helpers
instead of reaching into app.state directly, which keeps the handlers
testable with a swapped-in lifespan.

Layer rule: no imports from api/.
  auth/dependencies.py may import from fastapi (for Request/HTTPException)
  because this module is part of the FastAPI dependency injection system.
"""

from __future__ import annotations

from fastapi import HTTPException, Request

from auth.service import AuthService


def get_auth_service(request: Request) -> AuthService:
    """Return the process-wide AuthService.

    Raises HTTP 503 if the lifespan has not wired one up yet (a request that
    arrives during startup or after shutdown).

    Use as a FastAPI dependency:
        @router.post("/auth/sign-in")
        def route(service: AuthService = Depends(get_auth_service)): ...
    """
    service: AuthService | None = getattr(request.app.state, "auth_service", None)
    if service is None:
        raise HTTPException(
            status_code=503,
            detail={"code": "unavailable", "message": "Auth service is not ready."},
        )
    return service
