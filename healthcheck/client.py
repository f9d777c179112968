"""
healthcheck/client.py -- HTTP client for the auth service's remote procedures.

Used by the health-check exerciser (healthcheck/runner.py) and usable from any
script that needs to drive a running service. One requests.Session per client
for connection pooling across the sign-up / sign-in / sign-out round trip.

Transport failures (connection refused, timeout, non-2xx) raise
AuthClientError. Operation failures (duplicate username, bad password) are
not errors: they come back as a normal response with status "failure".
"""

import logging
from typing import Any, Optional

import requests

logger = logging.getLogger("authservice.client")

_API_PREFIX = "/api/v1/auth"


class AuthClientError(Exception):
    """Raised when the auth service cannot be reached or answers with an HTTP error."""


class AuthClient:
    """Thin wrapper over the three auth RPCs.

    Usage:
        client = AuthClient("http://[::1]:50051")
        client.sign_up("alice", "pw1")            # {"status": "success"}
        resp = client.sign_in("alice", "pw1")     # {"status": ..., "identity": ..., "token": ...}
        client.sign_out(resp["token"])
        client.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        # These are our own endpoints; a redirect means something is misconfigured.
        self._session.max_redirects = 3

    def sign_up(self, username: str, password: str) -> dict[str, Any]:
        return self._call("sign-up", {"username": username, "password": password})

    def sign_in(self, username: str, password: str) -> dict[str, Any]:
        return self._call("sign-in", {"username": username, "password": password})

    def sign_out(self, token: str) -> dict[str, Any]:
        return self._call("sign-out", {"token": token})

    def _call(self, operation: str, payload: dict[str, str]) -> dict[str, Any]:
        url = f"{self.base_url}{_API_PREFIX}/{operation}"
        try:
            resp = self._session.post(url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            body = resp.json()
        except requests.RequestException as e:
            logger.warning("Auth service call %s failed: %s", operation, e)
            raise AuthClientError(f"{operation} request failed: {e}") from e
        except ValueError as e:
            raise AuthClientError(f"{operation} returned a non-JSON body") from e
        if not isinstance(body, dict):
            raise AuthClientError(f"{operation} returned {type(body).__name__}, expected a JSON object")
        return body

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "AuthClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
