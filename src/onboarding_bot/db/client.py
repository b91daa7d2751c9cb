"""
Onboarding Helper - Supabase Client.

Low-level database access for the KV table.
"""

import logging

from supabase import Client, create_client

from onboarding_bot.config import ConfigurationError, Settings, settings
from onboarding_bot.db.kv import InMemoryKVStore, KeyValueStore, SupabaseKVStore

logger = logging.getLogger(__name__)

# Singleton client instance
_client: Client | None = None


def get_client(config: Settings | None = None) -> Client:
    """
    Get the Supabase client (service role).

    Uses singleton pattern to reuse connection.
    """
    global _client

    if _client is None:
        config = config or settings
        if not config.supabase_url or not config.supabase_service_role_key:
            raise ConfigurationError(
                "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY are required for KV_BACKEND=supabase"
            )
        _client = create_client(
            config.supabase_url,
            config.supabase_service_role_key,
        )

    return _client


def create_kv_store(config: Settings) -> KeyValueStore:
    """Build the KV store selected by KV_BACKEND."""
    if config.kv_backend == "memory":
        logger.warning("Using in-memory KV store; onboarding state will not survive a restart")
        return InMemoryKVStore()

    return SupabaseKVStore(get_client(config), table=config.kv_table)
