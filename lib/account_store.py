# =============================================================================
# lib/account_store.py - Subscribed Address Storage
# =============================================================================
# Persistence for the watch-list of Stellar addresses. Each address is one
# row in the accounts table, keyed by a unique `stellar_address` column:
#
#   CREATE TABLE accounts (stellar_address TEXT PRIMARY KEY, ...);
#
# Both write operations are single PostgREST calls that the database applies
# atomically, so concurrent identical requests can never create duplicates:
# - ensure_address_present -> INSERT ... ON CONFLICT DO NOTHING
# - ensure_address_removed -> DELETE ... WHERE stellar_address = ?
# =============================================================================

from __future__ import annotations

import logging

from supabase import Client

from lib.supabase_client import SupabaseClientError

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "accounts"
ADDRESS_COLUMN = "stellar_address"


class AccountStore:
    """
    Idempotent insert/delete access to the accounts table.

    The Supabase client is passed in, so tests can hand over a mock and the
    app can share one client across requests.

    Example:
        store = AccountStore(SupabaseClient.get_client())
        store.ensure_address_present("GABC...")
        store.ensure_address_present("GABC...")  # no-op, still one row
        store.ensure_address_removed("GABC...")
        store.ensure_address_removed("GABC...")  # no-op
    """

    def __init__(self, client: Client, table: str = DEFAULT_TABLE):
        self._client = client
        self._table = table

    @property
    def table(self) -> str:
        return self._table

    def ensure_address_present(self, address: str) -> None:
        """
        Insert a row for address unless one already exists.

        Raises:
            SupabaseClientError: If the insert fails for any reason other
                than the row already existing
        """
        try:
            (
                self._client.table(self._table)
                .upsert(
                    {ADDRESS_COLUMN: address},
                    on_conflict=ADDRESS_COLUMN,
                    ignore_duplicates=True,
                )
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert address: {e}",
                code="INSERT_ADDRESS_FAILED",
                suggestion=f"Check that the {self._table} table exists and has a unique {ADDRESS_COLUMN} column",
                details={"address": address, "table": self._table},
            ) from e

        logger.debug(f"Ensured {address} is present in {self._table}")

    def ensure_address_removed(self, address: str) -> None:
        """
        Delete the row for address if there is one.

        Raises:
            SupabaseClientError: If the delete fails
        """
        try:
            (
                self._client.table(self._table)
                .delete()
                .eq(ADDRESS_COLUMN, address)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete address: {e}",
                code="DELETE_ADDRESS_FAILED",
                suggestion=f"Check that the {self._table} table is reachable",
                details={"address": address, "table": self._table},
            ) from e

        logger.debug(f"Ensured {address} is absent from {self._table}")

    def ping(self) -> None:
        """
        Run the cheapest possible query against the table.

        Raises:
            SupabaseClientError: If the table can't be queried
        """
        try:
            self._client.table(self._table).select(ADDRESS_COLUMN).limit(1).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Accounts table is unreachable: {e}",
                code="PING_FAILED",
                suggestion="Check SUPABASE_URL and network connectivity",
                details={"table": self._table},
            ) from e
