"""
Onboarding Helper - Persistence.

Key-value storage for onboarding records.
"""

from onboarding_bot.db.kv import (
    InMemoryKVStore,
    KeyValueStore,
    StoreError,
    SupabaseKVStore,
)

__all__ = [
    "InMemoryKVStore",
    "KeyValueStore",
    "StoreError",
    "SupabaseKVStore",
]
