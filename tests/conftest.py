"""
tests/conftest.py -- Shared test fixtures for auth service tests.

This module provides:
  - user_store / session_store / service: fresh in-memory stores per test
  - _patch_lifespan(): wires test stores into app.state, bypassing real startup
  - api_client: TestClient over the real FastAPI app with isolated stores

Design: the API fixture is function-scoped so every test starts with empty
stores. Tests that sign up "alice" must not see the "alice" of another test.
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import asynccontextmanager

import pytest
from fastapi.testclient import TestClient

from api.main import app
from auth.service import AuthService
from auth.sessions import InMemorySessionStore
from auth.users import InMemoryUserStore

# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def service(user_store: InMemoryUserStore, session_store: InMemorySessionStore) -> AuthService:
    return AuthService(user_store, session_store)


# ---------------------------------------------------------------------------
# API fixture
# ---------------------------------------------------------------------------


def _patch_lifespan(service: AuthService):
    """Return an async context manager that replaces the real lifespan.

    Wires a pre-built AuthService into app.state so tests can inspect the
    same store instances the route handlers use.
    """

    @asynccontextmanager
    async def test_lifespan(app):
        app.state.user_store = service.user_store
        app.state.session_store = service.session_store
        app.state.auth_service = service
        yield
        app.state.auth_service = None

    return test_lifespan


@pytest.fixture
def api_client(service: AuthService) -> Generator[tuple[TestClient, AuthService], None, None]:
    """Yield (client, service) for API integration tests.

    The TestClient uses the real FastAPI app with a patched lifespan so tests
    hit real route handlers and middleware but use isolated in-memory stores.
    """
    original = app.router.lifespan_context
    app.router.lifespan_context = _patch_lifespan(service)
    try:
        with TestClient(app, raise_server_exceptions=True) as client:
            yield client, service
    finally:
        app.router.lifespan_context = original
