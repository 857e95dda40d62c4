# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - strkey.py: Stellar StrKey encoding and checksum validation
# - supabase_client.py: Process-wide Supabase client factory
# - account_store.py: Idempotent insert/delete for subscribed addresses
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.account_store import AccountStore
from lib.strkey import (
    StrKeyError,
    decode_check,
    encode_check,
    encode_ed25519_public_key,
    is_valid_ed25519_public_key,
)
from lib.supabase_client import SupabaseClient, SupabaseClientError

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    "AccountStore",
    # StrKey
    "StrKeyError",
    "decode_check",
    "encode_check",
    "encode_ed25519_public_key",
    "is_valid_ed25519_public_key",
]
