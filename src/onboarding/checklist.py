"""
Checklist Rendering.

Turns an OnboardingState into the welcome message and the six message
attachments shown in the bot DM. Rendering is pure: same state, same
translations, same callback URL -> same output.

Buttons post back to <callback>/complete-step with either
{"step": <step>} or {"action": "open_signature_dialog"} as context.
"""

from typing import Any

from pydantic import BaseModel, Field

from .i18n import Translations
from .state import OnboardingState, OnboardingStep

ACTION_OPEN_SIGNATURE_DIALOG = "open_signature_dialog"
COMPLETE_STEP_PATH = "/complete-step"

CHECKED = "✅"
UNCHECKED = "☐"


# =============================================================================
# Wire Models (Mattermost message attachments)
# =============================================================================

class ActionIntegration(BaseModel):
    url: str
    context: dict[str, Any] = Field(default_factory=dict)


class PostAction(BaseModel):
    """An interactive button."""
    id: str
    name: str
    type: str = "button"
    integration: ActionIntegration


class Attachment(BaseModel):
    """One checklist entry."""
    title: str
    text: str
    actions: list[PostAction] = Field(default_factory=list)


# =============================================================================
# Rendering
# =============================================================================

def checkbox(done: bool) -> str:
    return CHECKED if done else UNCHECKED


def _button(action_id: str, name: str, callback_url: str, context: dict[str, Any]) -> PostAction:
    # Mattermost action ids must be alphanumeric
    return PostAction(
        id=action_id.replace("_", ""),
        name=name,
        integration=ActionIntegration(url=callback_url, context=context),
    )


def _step_actions(step: OnboardingStep, tr: Translations, callback_url: str) -> list[PostAction]:
    actions = []
    if step is OnboardingStep.PROFILE:
        actions.append(_button(
            ACTION_OPEN_SIGNATURE_DIALOG,
            tr.button_generate_signature,
            callback_url,
            {"action": ACTION_OPEN_SIGNATURE_DIALOG},
        ))
    actions.append(_button(
        f"complete{step.value}",
        tr.step(step).button,
        callback_url,
        {"step": step.value},
    ))
    return actions


def build_checklist_attachments(
    state: OnboardingState,
    tr: Translations,
    base_url: str | None,
) -> list[Attachment]:
    """
    Render all six steps in checklist order.

    Args:
        state: Current onboarding state
        tr: Active translations
        base_url: Callback base URL; None renders the checklist without buttons

    Returns:
        Exactly one attachment per OnboardingStep
    """
    callback_url = f"{base_url}{COMPLETE_STEP_PATH}" if base_url else None

    attachments = []
    for step in OnboardingStep:
        text = tr.step(step)
        attachments.append(Attachment(
            title=text.title,
            text=f"{checkbox(state.is_done(step))} {text.description}{text.link}",
            actions=_step_actions(step, tr, callback_url) if callback_url else [],
        ))
    return attachments


def attachments_payload(attachments: list[Attachment]) -> list[dict]:
    """Attachments as JSON-ready dicts for post props."""
    return [a.model_dump() for a in attachments]


def build_welcome_message(tr: Translations, display_name: str, team_name: str) -> str:
    return (
        tr.welcome_greeting.format(name=display_name, team=team_name)
        + "\n\n"
        + tr.welcome_intro
        + "\n\n"
        + tr.welcome_closing
    )
