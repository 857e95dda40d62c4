# =============================================================================
# core/validators.py - Address Validation
# =============================================================================
# Decides whether a submitted string is a Stellar account address that can
# be watched. Only "G..." ed25519 public keys qualify; secret seeds, muxed
# accounts and anything with a bad checksum are rejected.
# =============================================================================

from lib.strkey import is_valid_ed25519_public_key
from app.exceptions import AddressValidationError, FIELD_ERROR_MESSAGES

INVALID_ADDRESS_MESSAGE = FIELD_ERROR_MESSAGES["address"]


def is_valid_address(value: object) -> bool:
    """Return True if value is a well-formed Stellar public key."""
    return is_valid_ed25519_public_key(value)


def validate_address(value: object) -> str:
    """
    Return value unchanged if it is a valid address.

    Raises:
        AddressValidationError: With {"address": "Invalid public key provided"}
    """
    if not is_valid_address(value):
        raise AddressValidationError({"address": INVALID_ADDRESS_MESSAGE})
    return value
