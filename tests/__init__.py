# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Account Watchlist API:
# - test_strkey.py: StrKey codec and address validation
# - test_account_store.py: Supabase calls made by the accounts store
# - test_subscription_service.py: Idempotent subscribe/unsubscribe logic
# - test_payments_api.py: Endpoint behaviour and error bodies
# - test_health.py: Health checks and the catch-all error handler
# - test_config.py: Settings parsing
#
# Run tests with: pytest
# =============================================================================
