# =============================================================================
# core/models/account.py - Subscription Schemas
# =============================================================================
# These models define the API contract for the payments endpoints:
# - AddressRequest: Body of subscribe/unsubscribe requests
# - SubscriptionResponse: Returned on success (same for every outcome)
# =============================================================================

from typing import Literal

from pydantic import BaseModel, Field


class AddressRequest(BaseModel):
    """
    Body for POST /payments/subscribe and POST /payments/unsubscribe.

    The address is only checked for type here; format and checksum are
    validated by core.validators so the error message stays consistent.

    Example:
        {
            "address": "GABC...XYZ"
        }
    """

    address: str = Field(
        ...,
        description="Stellar account address (G...)"
    )


class SubscriptionResponse(BaseModel):
    """Successful subscribe/unsubscribe."""

    status: Literal["ok"] = "ok"
