# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated, Callable

from fastapi import Depends

from app.config import settings
from core.services.subscription_service import SubscriptionService
from lib.account_store import AccountStore
from lib.supabase_client import SupabaseClient


def get_account_store() -> AccountStore:
    """
    Get the accounts table store.

    Wraps the shared Supabase client; building the wrapper is free.

    Raises:
        SupabaseClientError: If the Supabase client can't be created
    """
    return AccountStore(SupabaseClient.get_client(), table=settings.ACCOUNTS_TABLE)


def get_account_store_factory() -> Callable[[], AccountStore]:
    """
    Get a callable that builds the accounts store.

    For handlers that need to catch client creation errors themselves
    (e.g. readiness checks) instead of failing during injection.
    """
    return get_account_store


def get_subscription_service(
    store: Annotated[AccountStore, Depends(get_account_store)],
) -> SubscriptionService:
    """Get a SubscriptionService bound to the accounts store."""
    return SubscriptionService(store)


# Type aliases for dependency injection
AccountStoreFactoryDep = Annotated[Callable[[], AccountStore], Depends(get_account_store_factory)]
SubscriptionServiceDep = Annotated[SubscriptionService, Depends(get_subscription_service)]
