# =============================================================================
# lib/strkey.py - Stellar StrKey Encoding
# =============================================================================
# Encodes and decodes Stellar "StrKey" strings:
#
#   base32( version_byte | payload | crc16_xmodem(version_byte | payload) )
#
# The checksum is stored little-endian and the base32 alphabet is RFC 4648
# upper case without padding. Account IDs start with "G", secret seeds with
# "S" and muxed accounts with "M".
#
# Usage:
#   from lib.strkey import is_valid_ed25519_public_key
#   is_valid_ed25519_public_key("GABC...")  # True / False
# =============================================================================

from __future__ import annotations

import base64
import binascii
import struct

# Version bytes (first base32 character is derived from these)
VERSION_ACCOUNT_ID = 6 << 3        # G...
VERSION_MUXED_ACCOUNT = 12 << 3    # M...
VERSION_SEED = 18 << 3             # S...

ED25519_KEY_LENGTH = 32

# 1 version byte + 32 key bytes + 2 checksum bytes = 35 bytes = 56 base32 chars
ED25519_STRKEY_LENGTH = 56


class StrKeyError(ValueError):
    """Raised when a StrKey string cannot be decoded."""


def _crc16_xmodem(data: bytes) -> bytes:
    """CRC16-XModem of data, packed little-endian."""
    return struct.pack("<H", binascii.crc_hqx(data, 0))


def encode_check(version_byte: int, payload: bytes) -> str:
    """
    Encode a payload as a StrKey string.

    Args:
        version_byte: One of the VERSION_* constants
        payload: Raw key bytes

    Returns:
        Upper-case base32 string without padding
    """
    data = bytes([version_byte]) + payload
    encoded = base64.b32encode(data + _crc16_xmodem(data))
    return encoded.decode("ascii").rstrip("=")


def decode_check(version_byte: int, encoded: str) -> bytes:
    """
    Decode a StrKey string and return its payload.

    Rejects lower case, padding, wrong version bytes and bad checksums.

    Raises:
        StrKeyError: If the string is not a valid StrKey for version_byte
    """
    if not isinstance(encoded, str) or not encoded:
        raise StrKeyError("StrKey must be a non-empty string")

    if "=" in encoded or len(encoded) % 8 != 0:
        # Every StrKey we accept encodes to a multiple of 5 bytes, so a
        # canonical encoding never needs padding.
        raise StrKeyError("StrKey has an invalid length")

    try:
        decoded = base64.b32decode(encoded.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError) as e:
        raise StrKeyError(f"StrKey is not valid base32: {e}") from e

    if len(decoded) < 3:
        raise StrKeyError("StrKey is too short")

    data, checksum = decoded[:-2], decoded[-2:]

    if data[0] != version_byte:
        raise StrKeyError(
            f"Unexpected version byte {data[0]} (expected {version_byte})"
        )

    if _crc16_xmodem(data) != checksum:
        raise StrKeyError("StrKey checksum mismatch")

    return data[1:]


def encode_ed25519_public_key(raw_key: bytes) -> str:
    """Encode 32 raw ed25519 public key bytes as a "G..." account ID."""
    if len(raw_key) != ED25519_KEY_LENGTH:
        raise StrKeyError(
            f"ed25519 public keys are {ED25519_KEY_LENGTH} bytes, got {len(raw_key)}"
        )
    return encode_check(VERSION_ACCOUNT_ID, raw_key)


def is_valid_ed25519_public_key(value: object) -> bool:
    """Check whether value is a well-formed "G..." account ID."""
    if not isinstance(value, str) or len(value) != ED25519_STRKEY_LENGTH:
        return False

    try:
        payload = decode_check(VERSION_ACCOUNT_ID, value)
    except StrKeyError:
        return False

    return len(payload) == ED25519_KEY_LENGTH
