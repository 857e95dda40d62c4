# =============================================================================
# core/services/subscription_service.py - Address Subscription Logic
# =============================================================================
# Keeps the watch-list in the requested state. Per address there are only
# two states, Absent and Subscribed, and both operations are valid from
# either one:
#
#   subscribe:   Absent -> Subscribed,  Subscribed -> Subscribed
#   unsubscribe: Subscribed -> Absent,  Absent -> Absent
#
# Callers can't tell whether anything changed; a repeat call is a success.
# =============================================================================

import logging
from typing import Protocol

from lib.supabase_client import SupabaseClientError
from app.exceptions import SubscriptionStorageError

logger = logging.getLogger(__name__)


class AddressStore(Protocol):
    """What the service needs from storage."""

    def ensure_address_present(self, address: str) -> None: ...

    def ensure_address_removed(self, address: str) -> None: ...


class SubscriptionService:
    """
    Service for subscribing and unsubscribing Stellar addresses.

    Addresses must already be validated. The store is injected so each
    request can be served from a shared client without global lookups.
    """

    def __init__(self, store: AddressStore):
        self._store = store

    def subscribe(self, address: str) -> None:
        """
        Make sure address is on the watch-list.

        Raises:
            SubscriptionStorageError: If the store fails
        """
        try:
            self._store.ensure_address_present(address)
        except SupabaseClientError as e:
            logger.error(f"Failed to subscribe {address}: {e}")
            raise SubscriptionStorageError("subscribe", address) from e

        logger.info(f"Subscribed address: {address}")

    def unsubscribe(self, address: str) -> None:
        """
        Make sure address is not on the watch-list.

        Raises:
            SubscriptionStorageError: If the store fails
        """
        try:
            self._store.ensure_address_removed(address)
        except SupabaseClientError as e:
            logger.error(f"Failed to unsubscribe {address}: {e}")
            raise SubscriptionStorageError("unsubscribe", address) from e

        logger.info(f"Unsubscribed address: {address}")
