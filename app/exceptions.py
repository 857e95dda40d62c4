# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Every error body has the same shape:
#   {"error": "<message>", "extras": {<field>: <message>, ...}}
# where "extras" is only present when there is field-level detail.
# =============================================================================

import json
import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

VALIDATION_ERROR_MESSAGE = "Validation error."
INVALID_BODY_MESSAGE = "Invalid request body"
INTERNAL_ERROR_MESSAGE = "An internal error occurred while servicing this request."

FIELD_REQUIRED_MESSAGE = "This field is required"

# Messages reported for a field when its value has the wrong type or format
FIELD_ERROR_MESSAGES = {
    "address": "Invalid public key provided",
}


class WatchlistException(Exception):
    """
    Base exception for the watch-list API.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        extras: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.extras = extras or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {"error": self.message}
        if self.extras:
            result["extras"] = self.extras
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class AddressValidationError(WatchlistException):
    """Raised when one or more request fields fail validation."""

    def __init__(self, extras: dict[str, str]):
        super().__init__(
            message=VALIDATION_ERROR_MESSAGE,
            status_code=400,
            extras=extras,
        )


class InvalidRequestBodyError(WatchlistException):
    """Raised when the request body isn't a JSON object."""

    def __init__(self):
        super().__init__(message=INVALID_BODY_MESSAGE, status_code=400)


# =============================================================================
# Storage Exceptions
# =============================================================================

class SubscriptionStorageError(WatchlistException):
    """
    Raised when the subscription store can't be reached or rejects a write.

    The underlying cause is logged, not returned to the client.
    """

    def __init__(self, operation: str, address: str):
        super().__init__(message=INTERNAL_ERROR_MESSAGE, status_code=500)
        self.operation = operation
        self.address = address


# =============================================================================
# Exception Handlers
# =============================================================================

async def watchlist_exception_handler(
    request: Request,
    exc: WatchlistException
) -> JSONResponse:
    """Convert WatchlistException to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def request_validation_to_exception(exc: RequestValidationError) -> WatchlistException:
    """
    Map FastAPI/Pydantic body errors onto our error shape.

    - Body isn't parseable JSON or isn't an object -> InvalidRequestBodyError
    - Missing fields -> "This field is required"
    - Wrong type -> the field's usual format message
    """
    extras: dict[str, str] = {}

    for error in exc.errors():
        loc = [part for part in error.get("loc", ()) if part != "body"]
        error_type = error.get("type", "")

        if error_type == "json_invalid" or not loc:
            return InvalidRequestBodyError()

        field = str(loc[0])
        if field in extras:
            continue

        if error_type == "missing":
            extras[field] = FIELD_REQUIRED_MESSAGE
        else:
            extras[field] = FIELD_ERROR_MESSAGES.get(field, error.get("msg", "Invalid value"))

    return AddressValidationError(extras)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors raised while parsing the body."""
    mapped = request_validation_to_exception(exc)
    logger.debug(f"Rejected request to {request.url.path}: {json.dumps(mapped.to_dict())}")
    return await watchlist_exception_handler(request, mapped)
