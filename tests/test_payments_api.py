# =============================================================================
# tests/test_payments_api.py - Payments Endpoint Tests
# =============================================================================
# End-to-end tests for POST /payments/subscribe and /payments/unsubscribe
# through the FastAPI app, with the in-memory store swapped in.
# =============================================================================

import os

import pytest

from lib.strkey import VERSION_SEED, encode_check

VALIDATION_ERROR = {
    "error": "Validation error.",
    "extras": {"address": "Invalid public key provided"},
}
INTERNAL_ERROR = {
    "error": "An internal error occurred while servicing this request.",
}


# =============================================================================
# Subscribe
# =============================================================================

class TestSubscribeAddress:

    def test_success_happy_path(self, client, store, random_address):
        address = random_address()

        response = client.post("/payments/subscribe", json={"address": address})

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assert store.addresses == {address}

    def test_address_already_exists(self, client, store, random_address):
        """Subscribing a known address returns the same success."""
        address = random_address()
        store.addresses.add(address)

        response = client.post("/payments/subscribe", json={"address": address})

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assert store.addresses == {address}

    def test_repeat_requests_identical(self, client, store, random_address):
        address = random_address()

        first = client.post("/payments/subscribe", json={"address": address})
        second = client.post("/payments/subscribe", json={"address": address})

        assert first.status_code == second.status_code == 200
        assert first.json() == second.json()
        assert store.addresses == {address}

    def test_invalid_address(self, client, store):
        response = client.post("/payments/subscribe", json={"address": "invalid"})

        assert response.status_code == 400
        assert response.json() == VALIDATION_ERROR
        assert store.calls == []

    def test_storage_failure(self, client, store, storage_down, random_address):
        store.fail_with = storage_down

        response = client.post("/payments/subscribe", json={"address": random_address()})

        assert response.status_code == 500
        assert response.json() == INTERNAL_ERROR


# =============================================================================
# Unsubscribe
# =============================================================================

class TestUnsubscribeAddress:

    def test_success_happy_path(self, client, store, random_address):
        address = random_address()
        store.addresses.add(address)

        response = client.post("/payments/unsubscribe", json={"address": address})

        assert response.status_code == 200
        assert store.addresses == set()

    def test_idempotency(self, client, store, random_address):
        """Unsubscribing an address that was never added still succeeds."""
        response = client.post("/payments/unsubscribe", json={"address": random_address()})

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assert store.addresses == set()

    def test_invalid_address(self, client, store):
        response = client.post("/payments/unsubscribe", json={"address": "invalid"})

        assert response.status_code == 400
        assert response.json() == VALIDATION_ERROR
        assert store.calls == []

    def test_storage_failure(self, client, store, storage_down, random_address):
        store.fail_with = storage_down

        response = client.post("/payments/unsubscribe", json={"address": random_address()})

        assert response.status_code == 500
        assert response.json() == INTERNAL_ERROR


# =============================================================================
# Request body handling (both endpoints)
# =============================================================================

@pytest.mark.parametrize("path", ["/payments/subscribe", "/payments/unsubscribe"])
class TestRequestBody:

    def test_empty_address(self, client, store, path):
        response = client.post(path, json={"address": ""})

        assert response.status_code == 400
        assert response.json() == VALIDATION_ERROR
        assert store.calls == []

    def test_non_string_address(self, client, store, path):
        response = client.post(path, json={"address": 42})

        assert response.status_code == 400
        assert response.json() == VALIDATION_ERROR
        assert store.calls == []

    def test_missing_address(self, client, store, path):
        response = client.post(path, json={})

        assert response.status_code == 400
        assert response.json() == {
            "error": "Validation error.",
            "extras": {"address": "This field is required"},
        }
        assert store.calls == []

    def test_malformed_json(self, client, store, path):
        response = client.post(
            path,
            content=b"{ not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}
        assert store.calls == []

    def test_body_not_an_object(self, client, store, path):
        response = client.post(path, json=["GABC"])

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    def test_secret_seed_rejected(self, client, store, path):
        """A secret seed must never end up on the watch-list."""
        seed = encode_check(VERSION_SEED, os.urandom(32))

        response = client.post(path, json={"address": seed})

        assert response.status_code == 400
        assert response.json() == VALIDATION_ERROR
        assert store.calls == []
