"""
Onboarding Flow.

The operations behind the HTTP callbacks and the new-user hook:

- start_onboarding_for_user: create state, open the DM, post the checklist
- complete_step: mark one step done and persist
- build_checklist_update: re-render the DM post after a button click
- open_signature_dialog / deliver_signature: the email signature round trip

Functions raise StoreError / PlatformError / ConfigurationError and leave it
to the caller (api.py) to log and map them to responses.
"""

import logging

from onboarding_bot.config import ConfigurationError
from onboarding_bot.platform import PlatformError, PlatformUser

from .checklist import (
    Attachment,
    attachments_payload,
    build_checklist_attachments,
    build_welcome_message,
)
from .context import OnboardingContext
from .forms import build_open_dialog_request
from .signature import SignatureRequest, generate_signature, signature_filename
from .state import OnboardingState, OnboardingStep

logger = logging.getLogger(__name__)

DEFAULT_TEAM_NAME = "Mattermost"


# =============================================================================
# Helpers
# =============================================================================

def lookup_primary_team_name(ctx: OnboardingContext, user_id: str) -> str:
    """Display name of the user's first team; most orgs have only one."""
    try:
        teams = ctx.platform.get_teams_for_user(user_id)
    except PlatformError as e:
        logger.warning(f"Team lookup failed for {user_id}: {e}")
        return DEFAULT_TEAM_NAME

    if not teams:
        return DEFAULT_TEAM_NAME
    return teams[0].display_name or DEFAULT_TEAM_NAME


def render_checklist(ctx: OnboardingContext, state: OnboardingState) -> list[Attachment]:
    """Render the checklist; without a callback URL the buttons are dropped."""
    try:
        base_url = ctx.base_url()
    except ConfigurationError as e:
        logger.error(f"Callback URL not configured, rendering checklist without buttons: {e}")
        base_url = None
    return build_checklist_attachments(state, ctx.translations, base_url)


def welcome_message(ctx: OnboardingContext, user: PlatformUser) -> str:
    team_name = lookup_primary_team_name(ctx, user.id)
    return build_welcome_message(ctx.translations, user.display_name, team_name)


# =============================================================================
# Checklist
# =============================================================================

def start_onboarding_for_user(ctx: OnboardingContext, user: PlatformUser) -> bool:
    """
    Greet a new user with the checklist.

    Idempotent: users with existing state (and bots) are skipped.

    Returns:
        True if onboarding was started by this call
    """
    if user.is_bot:
        return False

    if ctx.store.load(user.id) is not None:
        logger.info(f"Onboarding already started for {user.id}")
        return False

    state = OnboardingState(user_id=user.id)
    ctx.store.save(state)

    channel = ctx.platform.get_direct_channel(ctx.bot.user_id, user.id)
    ctx.platform.create_post({
        "user_id": ctx.bot.user_id,
        "channel_id": channel.id,
        "message": welcome_message(ctx, user),
        "props": {"attachments": attachments_payload(render_checklist(ctx, state))},
    })

    logger.info(f"Started onboarding for {user.id}")
    return True


def complete_step(ctx: OnboardingContext, user_id: str, step: OnboardingStep) -> OnboardingState:
    """
    Mark a step done for a user.

    Users without a record get a fresh one. Completing an already completed
    step writes nothing.
    """
    state = ctx.store.load(user_id)
    if state is None:
        state = OnboardingState(user_id=user_id)

    if state.mark_complete(step):
        ctx.store.save(state)
        logger.info(f"User {user_id} completed step '{step.value}'")
    else:
        logger.debug(f"Step '{step.value}' already complete for {user_id}")

    return state


def build_checklist_update(
    ctx: OnboardingContext,
    state: OnboardingState,
    post_id: str,
    channel_id: str,
    step: OnboardingStep,
) -> dict:
    """
    Post-action response that replaces the checklist post.

    Raises:
        PlatformError: The user could not be looked up
    """
    user = ctx.platform.get_user(state.user_id)
    tr = ctx.translations

    return {
        "update": {
            "id": post_id,
            "channel_id": channel_id,
            "message": welcome_message(ctx, user),
            "props": {"attachments": attachments_payload(render_checklist(ctx, state))},
        },
        "ephemeral_text": tr.step_marked_complete.format(step=step.value),
    }


# =============================================================================
# Email Signature
# =============================================================================

def open_signature_dialog(ctx: OnboardingContext, user_id: str, trigger_id: str) -> dict:
    """
    Open the signature dialog for the clicking user.

    Raises:
        PlatformError: User lookup or dialog open failed
        ConfigurationError: No callback URL to submit the dialog to
    """
    user = ctx.platform.get_user(user_id)
    request = build_open_dialog_request(ctx.translations, user, trigger_id, ctx.base_url())
    ctx.platform.open_interactive_dialog(request)
    return {"ephemeral_text": ctx.translations.dialog_opening}


def render_signature(ctx: OnboardingContext, request: SignatureRequest) -> str:
    return generate_signature(request, ctx.templates)


def signature_message(ctx: OnboardingContext, request: SignatureRequest) -> str:
    tr = ctx.translations
    project_name = tr.project_name(request.project)
    return (
        tr.signature_generated_title
        + "\n\n"
        + tr.signature_generated_message.format(name=request.full_name, project=project_name)
        + tr.signature_instructions_title
        + tr.signature_instructions_outlook
        + tr.signature_instructions_thunderbird
        + tr.signature_project_footer.format(project=project_name)
    )


def upload_signature(
    ctx: OnboardingContext,
    channel_id: str,
    request: SignatureRequest,
    signature_html: str,
) -> str:
    """
    Upload the signature file to the channel the dialog was opened from.

    Raises:
        PlatformError: Upload failed
    """
    filename = signature_filename(request.full_name, request.project)
    return ctx.platform.upload_file(channel_id, filename, signature_html.encode("utf-8"))


def post_signature(
    ctx: OnboardingContext,
    user_id: str,
    channel_id: str,
    request: SignatureRequest,
    file_id: str,
) -> None:
    """Send the uploaded signature with instructions. Failures are logged only."""
    try:
        target_channel_id = ctx.platform.get_direct_channel(ctx.bot.user_id, user_id).id
    except PlatformError as e:
        logger.error(f"Failed to get DM channel for {user_id}, using {channel_id}: {e}")
        target_channel_id = channel_id

    try:
        ctx.platform.create_post({
            "user_id": ctx.bot.user_id,
            "channel_id": target_channel_id,
            "message": signature_message(ctx, request),
            "file_ids": [file_id],
        })
    except PlatformError as e:
        logger.error(f"Failed to post signature for {user_id}: {e}")
