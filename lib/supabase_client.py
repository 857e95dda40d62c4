# =============================================================================
# lib/supabase_client.py - Supabase Client Factory
# =============================================================================
# Builds the Supabase client shared by the whole process. The client is
# created lazily on first use and reused afterwards; everything that needs
# database access receives it through dependency injection rather than
# calling into this module directly.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   client = SupabaseClient.get_client()
# =============================================================================

from __future__ import annotations

import logging
import threading
from typing import Any

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Provides actionable error messages:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Holder for the process-wide Supabase client.

    Route handlers run on a threadpool, so creation is guarded by a lock.
    """

    _instance: Client | None = None
    _lock = threading.Lock()

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the Supabase client.

        Uses the service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    try:
                        cls._instance = create_client(
                            settings.SUPABASE_URL,
                            settings.SUPABASE_SERVICE_KEY
                        )
                        logger.info("Supabase client initialized successfully")
                    except Exception as e:
                        raise SupabaseClientError(
                            message=f"Failed to create Supabase client: {e}",
                            code="CLIENT_INIT_FAILED",
                            suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                        ) from e
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (used on shutdown and in tests)."""
        with cls._lock:
            cls._instance = None
