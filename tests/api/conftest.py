"""
tests.api.conftest

Shared pytest fixtures for API tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from bunny_app.api.dependencies import get_random_source
from bunny_app.api.main import create_app


class FixedRandom:
    """randrange() always returns the same index."""

    def __init__(self, index: int) -> None:
        self.index = index
        self.calls = 0

    def randrange(self, stop: int) -> int:
        self.calls += 1
        assert 0 <= self.index < stop
        return self.index


@pytest.fixture()
def fixed_random():
    """Factory for a random source pinned to one catalog index."""
    return FixedRandom


@pytest.fixture()
def client_factory():
    """
    Factory fixture that creates a fresh TestClient.

    IMPORTANT:
        Pass a random source to pin the breed selection, or set env vars
        before calling so get_settings() picks them up.
    """

    def _make(rng=None, *, raise_server_exceptions: bool = True) -> TestClient:
        app = create_app()
        if rng is not None:
            app.dependency_overrides[get_random_source] = lambda: rng
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    return client_factory()
