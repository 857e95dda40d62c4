# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - account.py: Subscribe/unsubscribe request and response schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .account import AddressRequest, SubscriptionResponse

__all__ = [
    "AddressRequest",
    "SubscriptionResponse",
]
