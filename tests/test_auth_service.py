"""Unit tests for auth/service.py -- AuthService orchestration.

Covers:
- sign_up / sign_in / sign_out status mapping
- failed sign-in never reaches the session store
- store errors are recovered into failure, never raised
- N concurrent sign-ups of one username produce exactly one success
- the end-to-end alice scenario
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest

from auth.exceptions import AuthStoreError
from auth.models import AuthResult, StatusCode
from auth.service import AuthService
from auth.sessions import SessionStore
from auth.users import InMemoryUserStore, UserStore

# ---------------------------------------------------------------------------
# Sign-up
# ---------------------------------------------------------------------------


def test_sign_up_new_username_succeeds(service):
    result = service.sign_up("alice", "pw1")
    assert result == AuthResult(status=StatusCode.success)
    assert result.identity == ""
    assert result.token == ""


def test_sign_up_duplicate_fails(service):
    service.sign_up("alice", "pw1")
    result = service.sign_up("alice", "pw2")
    assert result.status is StatusCode.failure
    assert result.identity == "" and result.token == ""


def test_sign_up_any_store_error_becomes_failure(session_store):
    users = MagicMock(spec=UserStore)
    users.create_user.side_effect = AuthStoreError("backend unavailable")
    service = AuthService(users, session_store)
    assert service.sign_up("alice", "pw1").status is StatusCode.failure


def test_sign_up_does_not_open_session(service, session_store):
    service.sign_up("alice", "pw1")
    assert session_store.count() == 0


# ---------------------------------------------------------------------------
# Sign-in
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("username", ["never-registered", "", "ALICE"])
def test_sign_in_unregistered_fails_with_empty_fields(service, username):
    service.sign_up("alice", "pw1")
    result = service.sign_in(username, "pw1")
    assert result == AuthResult.failure()
    assert result.identity == "" and result.token == ""


@pytest.mark.parametrize("password", ["wrong", "", "pw1 ", "PW1"])
def test_sign_in_wrong_password_fails_with_empty_fields(service, password):
    service.sign_up("alice", "pw1")
    assert service.sign_in("alice", password) == AuthResult.failure()


def test_sign_in_success_returns_identity_and_token(service, user_store, session_store):
    service.sign_up("alice", "pw1")
    result = service.sign_in("alice", "pw1")
    assert result.ok
    assert result.identity == user_store.get_user_identity("alice", "pw1")
    assert result.token
    assert session_store.get_session_identity(result.token) == result.identity


def test_failed_sign_in_never_touches_session_store(user_store):
    sessions = MagicMock(spec=SessionStore)
    service = AuthService(user_store, sessions)
    service.sign_in("ghost", "pw")
    user_store.create_user("alice", "pw1")
    service.sign_in("alice", "wrong")
    sessions.create_session.assert_not_called()


def test_repeated_sign_ins_open_independent_sessions(service, session_store):
    service.sign_up("alice", "pw1")
    first = service.sign_in("alice", "pw1")
    second = service.sign_in("alice", "pw1")
    assert first.identity == second.identity
    assert first.token != second.token
    assert session_store.count() == 2


# ---------------------------------------------------------------------------
# Sign-out
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("token", ["", "unknown-token"])
def test_sign_out_always_succeeds(service, token):
    assert service.sign_out(token) == AuthResult.success()


def test_sign_out_is_idempotent_and_revokes(service, session_store):
    service.sign_up("alice", "pw1")
    token = service.sign_in("alice", "pw1").token
    assert service.sign_out(token).ok
    assert session_store.get_session_identity(token) is None
    assert service.sign_out(token).ok


def test_sign_out_leaves_other_sessions_alone(service, session_store):
    service.sign_up("alice", "pw1")
    keep = service.sign_in("alice", "pw1").token
    drop = service.sign_in("alice", "pw1").token
    service.sign_out(drop)
    assert session_store.get_session_identity(keep) is not None


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


def test_concurrent_sign_ups_same_username_exactly_one_success(session_store):
    user_store = InMemoryUserStore()
    service = AuthService(user_store, session_store)
    n = 24
    barrier = threading.Barrier(n)

    def attempt(_: int) -> StatusCode:
        barrier.wait()
        return service.sign_up("shared-name", "pw").status

    with ThreadPoolExecutor(max_workers=n) as pool:
        statuses = list(pool.map(attempt, range(n)))

    assert statuses.count(StatusCode.success) == 1
    assert statuses.count(StatusCode.failure) == n - 1
    assert user_store.count() == 1


def test_concurrent_sign_in_and_sign_out(service, session_store):
    service.sign_up("alice", "pw1")

    def cycle(_: int) -> bool:
        result = service.sign_in("alice", "pw1")
        return result.ok and service.sign_out(result.token).ok

    with ThreadPoolExecutor(max_workers=16) as pool:
        assert all(pool.map(cycle, range(200)))
    assert session_store.count() == 0


# ---------------------------------------------------------------------------
# Scenario
# ---------------------------------------------------------------------------


def test_alice_end_to_end(service, session_store):
    assert service.sign_up("alice", "pw1").status is StatusCode.success

    signed_in = service.sign_in("alice", "pw1")
    assert signed_in.status is StatusCode.success
    token = signed_in.token

    assert service.sign_in("alice", "wrong") == AuthResult.failure()
    assert service.sign_out(token).status is StatusCode.success
    assert service.sign_out(token).status is StatusCode.success
    assert session_store.get_session_identity(token) is None
