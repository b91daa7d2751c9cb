"""
Onboarding State Store.

load/save of OnboardingState over the KV backend. Records live under
"onboarding:user:<user_id>" and are never deleted by this service.
"""

import logging
from datetime import datetime, timezone

from onboarding_bot.db import KeyValueStore, StoreError

from .state import OnboardingState

logger = logging.getLogger(__name__)

ONBOARDING_KEY_PREFIX = "onboarding:user:"


def state_key(user_id: str) -> str:
    return ONBOARDING_KEY_PREFIX + user_id


class StateStore:
    """Read-modify-write access to per-user onboarding records."""

    def __init__(self, kv: KeyValueStore):
        self._kv = kv

    def load(self, user_id: str) -> OnboardingState | None:
        """
        Load a user's state.

        Returns:
            The stored state, or None if the user has never been onboarded

        Raises:
            StoreError: Backend failure or an unreadable record
        """
        raw = self._kv.get(state_key(user_id))
        if raw is None:
            return None

        try:
            return OnboardingState.from_json(raw)
        except (ValueError, TypeError, AttributeError) as e:
            raise StoreError(f"corrupt onboarding record for {user_id}: {e}") from e

    def save(self, state: OnboardingState) -> None:
        """
        Persist state.

        Always refreshes last_updated; backfills started_at when unset.

        Raises:
            StoreError: Backend failure
        """
        state.last_updated = datetime.now(timezone.utc)
        if state.started_at is None:
            state.started_at = state.last_updated

        self._kv.set(state_key(state.user_id), state.to_json())
        logger.debug(f"Saved onboarding state for {state.user_id}: {sorted(state.completed_steps)}")
