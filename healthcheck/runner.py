"""
healthcheck/runner.py -- Periodic liveness exerciser for a running auth service.

Each round signs up a fresh random user, signs in with the same credentials,
signs out with the returned token, logs the three statuses, then sleeps.
A healthy service reports success for all three on every round.

Transport errors are not swallowed: AuthClientError propagates out of
run_health_check() and ends the loop, so a supervisor (Docker, systemd)
sees the process exit when the service is unreachable.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from auth.models import StatusCode
from healthcheck.client import AuthClient

logger = logging.getLogger("authservice.health_check")


@dataclass(frozen=True)
class RoundResult:
    sign_up: StatusCode
    sign_in: StatusCode
    sign_out: StatusCode

    @property
    def healthy(self) -> bool:
        return all(s is StatusCode.success for s in (self.sign_up, self.sign_in, self.sign_out))


def run_round(client: AuthClient) -> RoundResult:
    """Run one SignUp -> SignIn -> SignOut round with random credentials."""
    username = str(uuid.uuid4())
    password = str(uuid.uuid4())

    resp = client.sign_up(username, password)
    sign_up = StatusCode.parse(resp.get("status"))
    logger.info("SIGN UP RESPONSE STATUS: %s", sign_up.value)

    resp = client.sign_in(username, password)
    sign_in = StatusCode.parse(resp.get("status"))
    logger.info("SIGN IN RESPONSE STATUS: %s", sign_in.value)

    # Sign out with whatever token came back; an empty token is still a valid call.
    resp = client.sign_out(resp.get("token", ""))
    sign_out = StatusCode.parse(resp.get("status"))
    logger.info("SIGN OUT RESPONSE STATUS: %s", sign_out.value)

    logger.info("--------------------------------------")
    return RoundResult(sign_up=sign_up, sign_in=sign_in, sign_out=sign_out)


def run_health_check(
    client: AuthClient,
    interval: float,
    iterations: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[RoundResult]:
    """Run rounds every `interval` seconds.

    Loops forever when iterations is None. Returns the collected round
    results when a finite iteration count is given (empty list otherwise,
    since an unbounded loop only returns by raising).
    """
    results: list[RoundResult] = []
    completed = 0
    while iterations is None or completed < iterations:
        result = run_round(client)
        if not result.healthy:
            logger.warning("Health check round reported a failure: %s", result)
        if iterations is not None:
            results.append(result)
        completed += 1
        if iterations is None or completed < iterations:
            sleep(interval)
    return results
