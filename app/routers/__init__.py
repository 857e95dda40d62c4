# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - payments.py: Address subscribe/unsubscribe endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import payments

__all__ = [
    "health",
    "payments",
]
