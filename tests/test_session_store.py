"""Unit tests for auth/sessions.py -- InMemorySessionStore.

Covers:
- create_session() returns a fresh UUID token bound to the identity
- one identity may hold several independent sessions
- delete_session() revokes a token and is a silent no-op for unknown/empty tokens
"""

import uuid
from concurrent.futures import ThreadPoolExecutor

from auth.sessions import SessionStore


def test_in_memory_store_implements_interface(session_store):
    assert isinstance(session_store, SessionStore)


def test_create_session_returns_token_for_identity(session_store):
    token = session_store.create_session("identity-1")
    assert token
    assert uuid.UUID(token).version == 4
    assert session_store.get_session_identity(token) == "identity-1"


def test_multiple_sessions_per_identity_are_independent(session_store):
    first = session_store.create_session("identity-1")
    second = session_store.create_session("identity-1")
    assert first != second
    assert len(session_store) == 2

    session_store.delete_session(first)
    assert session_store.get_session_identity(first) is None
    assert session_store.get_session_identity(second) == "identity-1"


def test_delete_session_removes_token(session_store):
    token = session_store.create_session("identity-1")
    session_store.delete_session(token)
    assert session_store.get_session_identity(token) is None
    assert session_store.count() == 0


def test_delete_session_twice_is_noop(session_store):
    token = session_store.create_session("identity-1")
    session_store.delete_session(token)
    session_store.delete_session(token)
    assert session_store.count() == 0


def test_delete_unknown_or_empty_token_is_noop(session_store):
    kept = session_store.create_session("identity-1")
    session_store.delete_session("")
    session_store.delete_session("does-not-exist")
    assert session_store.get_session_identity(kept) == "identity-1"
    assert session_store.count() == 1


def test_unknown_token_lookup_returns_none(session_store):
    assert session_store.get_session_identity("") is None
    assert session_store.get_session_identity("nope") is None


def test_concurrent_session_creation_yields_unique_tokens(session_store):
    with ThreadPoolExecutor(max_workers=16) as pool:
        tokens = list(pool.map(lambda _: session_store.create_session("identity-1"), range(500)))
    assert len(set(tokens)) == 500
    assert session_store.count() == 500
