"""
Onboarding State Management.

Tracks which checklist steps a new teammate has completed.
State is persisted as JSON under a per-user KV key (see store.py).

Steps have no ordering constraints: any subset can be marked done, in any
order, and marking a step done is one-directional.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
import json
import re


class OnboardingStep(str, Enum):
    """Checklist steps, in display order."""
    ACCOUNTS = "accounts"      # Step 1: Accounts & access
    PROFILE = "profile"        # Step 2: Profile (+ email signature)
    CHANNELS = "channels"      # Step 3: Communication channels
    TOOLS = "tools"            # Step 4: Devices & tools
    POLICIES = "policies"      # Step 5: Work practices & policies
    INTRO = "intro"            # Step 6: People & check-ins

    @classmethod
    def parse(cls, value: object) -> "OnboardingStep | None":
        """Return the step named by value, or None if it is not a known step."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# Older records carry this zero timestamp for unset fields
_ZERO_TIME_PREFIX = "0001-01-01"

# datetime keeps microseconds; stored values may carry nanoseconds
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value or value.startswith(_ZERO_TIME_PREFIX):
        return None
    value = _EXCESS_FRACTION.sub(r"\1", value)
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _format_timestamp(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class OnboardingState:
    """
    Per-user onboarding record.

    completed_steps keeps the raw step-name -> bool map so records written by
    older versions round-trip untouched; only OnboardingStep members are ever
    set by this service.
    """
    user_id: str
    completed_steps: dict[str, bool] = field(default_factory=dict)
    started_at: datetime | None = None
    last_updated: datetime | None = None

    def is_done(self, step: OnboardingStep) -> bool:
        return bool(self.completed_steps.get(step.value, False))

    def mark_complete(self, step: OnboardingStep) -> bool:
        """
        Mark a step as done.

        Returns:
            True if the state changed, False if the step was already done
        """
        if self.is_done(step):
            return False
        self.completed_steps[step.value] = True
        return True

    def completed(self) -> list[OnboardingStep]:
        """Completed steps in checklist order."""
        return [step for step in OnboardingStep if self.is_done(step)]

    @property
    def is_finished(self) -> bool:
        return all(self.is_done(step) for step in OnboardingStep)

    def to_dict(self) -> dict:
        """Serialize state to dict for JSON storage."""
        return {
            "user_id": self.user_id,
            "completed_steps": dict(self.completed_steps),
            "started_at": _format_timestamp(self.started_at),
            "last_updated": _format_timestamp(self.last_updated),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "OnboardingState":
        """Deserialize state from dict."""
        return cls(
            user_id=data.get("user_id", ""),
            completed_steps={
                str(k): bool(v) for k, v in (data.get("completed_steps") or {}).items()
            },
            started_at=_parse_timestamp(data.get("started_at")),
            last_updated=_parse_timestamp(data.get("last_updated")),
        )

    def to_json(self) -> str:
        """Serialize state to JSON string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, json_str: str) -> "OnboardingState":
        """Deserialize state from JSON string."""
        return cls.from_dict(json.loads(json_str))
