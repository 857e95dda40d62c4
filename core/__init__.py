# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for request/response validation
# - validators.py: Stellar address validation
# - services/: Subscription management over an injected store
#
# Code in this package should NOT touch requests, routers or responses.
# This keeps the logic testable and reusable.
# =============================================================================
