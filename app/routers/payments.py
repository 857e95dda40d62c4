# =============================================================================
# app/routers/payments.py - Payment Subscription Endpoints
# =============================================================================
# Lets clients add or remove Stellar addresses from the payment watch-list.
# Both endpoints are idempotent: repeating a request returns the same
# success response and leaves the watch-list unchanged.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import SubscriptionServiceDep
from core.models.account import AddressRequest, SubscriptionResponse
from core.validators import validate_address

router = APIRouter()


_ERROR_RESPONSES = {
    400: {
        "description": "Invalid address or request body",
        "content": {
            "application/json": {
                "example": {
                    "error": "Validation error.",
                    "extras": {"address": "Invalid public key provided"},
                }
            }
        },
    },
    500: {
        "description": "Storage failure",
        "content": {
            "application/json": {
                "example": {"error": "An internal error occurred while servicing this request."}
            }
        },
    },
}


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/subscribe", response_model=SubscriptionResponse, responses=_ERROR_RESPONSES)
def subscribe_address(request: AddressRequest, service: SubscriptionServiceDep):
    """
    Start watching an address for incoming payments.

    Succeeds whether or not the address was already subscribed.
    """
    address = validate_address(request.address)
    service.subscribe(address)
    return SubscriptionResponse()


@router.post("/unsubscribe", response_model=SubscriptionResponse, responses=_ERROR_RESPONSES)
def unsubscribe_address(request: AddressRequest, service: SubscriptionServiceDep):
    """
    Stop watching an address.

    Succeeds whether or not the address was subscribed.
    """
    address = validate_address(request.address)
    service.unsubscribe(address)
    return SubscriptionResponse()
