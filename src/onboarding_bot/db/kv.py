"""
Key-Value Store.

Per-user onboarding records and the bot's own bookkeeping live under string
keys with string (JSON) values. Two backends:

- SupabaseKVStore: one row per key in a Supabase table (production)
- InMemoryKVStore: process-local dict (development, tests)

Writes are last-write-wins; there is no compare-and-swap.
"""

import logging
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from supabase import Client

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The key-value backend failed to read or write."""


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal get/set interface over the persistence backend."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key does not exist."""
        ...

    def set(self, key: str, value: str) -> None:
        """Create or overwrite the value for key."""
        ...


class InMemoryKVStore:
    """Dict-backed store. Data is lost on restart."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self) -> list[str]:
        return list(self._data)


class SupabaseKVStore:
    """
    Supabase-backed store.

    Expects a table shaped like:

        create table plugin_kv (
            key text primary key,
            value text not null,
            updated_at timestamptz not null default now()
        );
    """

    def __init__(self, client: Client, table: str = "plugin_kv") -> None:
        self._client = client
        self._table = table

    def get(self, key: str) -> str | None:
        try:
            result = (
                self._client.table(self._table)
                .select("value")
                .eq("key", key)
                .limit(1)
                .execute()
            )
        except Exception as e:
            raise StoreError(f"KVGet {key}: {e}") from e

        if not result.data:
            return None
        return result.data[0]["value"]

    def set(self, key: str, value: str) -> None:
        try:
            self._client.table(self._table).upsert({
                "key": key,
                "value": value,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }).execute()
        except Exception as e:
            raise StoreError(f"KVSet {key}: {e}") from e
