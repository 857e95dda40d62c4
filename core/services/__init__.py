# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .subscription_service import AddressStore, SubscriptionService

__all__ = [
    "AddressStore",
    "SubscriptionService",
]
