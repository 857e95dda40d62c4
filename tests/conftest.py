# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides an in-memory accounts store and a TestClient wired to it
# =============================================================================

import os
import threading

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient
from stellar_sdk import Keypair

from app.dependencies import get_account_store, get_account_store_factory
from app.main import app
from lib.supabase_client import SupabaseClientError


# =============================================================================
# Fakes
# =============================================================================

class InMemoryAccountStore:
    """
    Stand-in for AccountStore backed by a set.

    Records every call so tests can assert storage was (or wasn't) touched.
    Set `fail_with` to make every operation raise.
    """

    def __init__(self):
        self.addresses: set[str] = set()
        self.calls: list[tuple[str, str | None]] = []
        self.fail_with: Exception | None = None
        self._lock = threading.Lock()

    def _check_failure(self):
        if self.fail_with is not None:
            raise self.fail_with

    def ensure_address_present(self, address: str) -> None:
        self.calls.append(("ensure_address_present", address))
        self._check_failure()
        with self._lock:
            self.addresses.add(address)

    def ensure_address_removed(self, address: str) -> None:
        self.calls.append(("ensure_address_removed", address))
        self._check_failure()
        with self._lock:
            self.addresses.discard(address)

    def ping(self) -> None:
        self.calls.append(("ping", None))
        self._check_failure()


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """Empty in-memory accounts store."""
    return InMemoryAccountStore()


@pytest.fixture
def client(store):
    """TestClient whose routes use the in-memory store."""
    app.dependency_overrides[get_account_store] = lambda: store
    app.dependency_overrides[get_account_store_factory] = lambda: (lambda: store)
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def random_address():
    """Factory for fresh valid Stellar account addresses (via stellar-sdk)."""
    def _make() -> str:
        return Keypair.random().public_key
    return _make


@pytest.fixture
def storage_down():
    """Error the in-memory store raises to simulate a lost connection."""
    return SupabaseClientError(
        message="connection refused",
        code="INSERT_ADDRESS_FAILED",
    )
