"""
Onboarding API Endpoints.

Callbacks the chat platform delivers to this service:

- POST /complete-step      interactive button clicks on the checklist post
- POST /submit-signature   signature dialog submissions
- POST /events/user-created  new-user hook that starts onboarding

Each request is handled independently; state is read-modify-write against
the KV store with last-write-wins semantics.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from onboarding_bot.config import ConfigurationError
from onboarding_bot.db import StoreError
from onboarding_bot.platform import PlatformError

from .checklist import ACTION_OPEN_SIGNATURE_DIALOG
from .context import OnboardingContext
from .flow import (
    build_checklist_update,
    complete_step,
    open_signature_dialog,
    post_signature,
    render_signature,
    start_onboarding_for_user,
    upload_signature,
)
from .forms import SignatureForm, validate_signature_form
from .signature import TemplateError
from .state import OnboardingStep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["onboarding"])


def get_onboarding_context(request: Request) -> OnboardingContext:
    """Context built at startup (see onboarding_bot.web.app)."""
    return request.app.state.onboarding


# =============================================================================
# Request Models
# =============================================================================


class PostActionRequest(BaseModel):
    """Interactive message action callback."""
    user_id: str
    channel_id: str = ""
    post_id: str = ""
    trigger_id: str = ""
    team_id: str = ""
    context: dict[str, Any] = Field(default_factory=dict)


class DialogSubmission(BaseModel):
    """Interactive dialog submission callback."""
    user_id: str
    channel_id: str = ""
    team_id: str = ""
    callback_id: str = ""
    state: str = ""
    cancelled: bool = False
    submission: dict[str, Any] = Field(default_factory=dict)


class UserCreatedEvent(BaseModel):
    user_id: str


class UserCreatedResponse(BaseModel):
    user_id: str
    started: bool


# =============================================================================
# Endpoints: Checklist
# =============================================================================


@router.post("/complete-step")
async def handle_complete_step(
    req: PostActionRequest,
    ctx: OnboardingContext = Depends(get_onboarding_context),
) -> dict:
    """Mark a checklist step done and re-render the checklist post."""
    if req.context.get("action") == ACTION_OPEN_SIGNATURE_DIALOG:
        return _open_signature_dialog(ctx, req)

    step = OnboardingStep.parse(req.context.get("step"))
    if step is None:
        raise HTTPException(status_code=400, detail="Unknown or missing step")

    try:
        state = complete_step(ctx, req.user_id, step)
    except StoreError as e:
        logger.error(f"Failed to update onboarding state for {req.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to save onboarding state")

    try:
        return build_checklist_update(ctx, state, req.post_id, req.channel_id, step)
    except PlatformError as e:
        logger.error(f"Failed to get user {req.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to load user")


def _open_signature_dialog(ctx: OnboardingContext, req: PostActionRequest) -> dict:
    try:
        return open_signature_dialog(ctx, req.user_id, req.trigger_id)
    except ConfigurationError as e:
        logger.error(f"Cannot open signature dialog, callback URL not configured: {e}")
        raise HTTPException(status_code=500, detail="Callback URL not configured")
    except PlatformError as e:
        logger.error(f"Failed to open signature dialog for {req.user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to open dialog")


# =============================================================================
# Endpoints: Signature
# =============================================================================


@router.post("/submit-signature")
async def handle_submit_signature(
    submission: DialogSubmission,
    ctx: OnboardingContext = Depends(get_onboarding_context),
) -> dict:
    """
    Generate, upload and post the email signature.

    Returns {} to close the dialog, {"errors": {...}} for invalid fields, or
    {"error": "..."} when generation or upload failed.
    """
    if submission.cancelled:
        return {}

    tr = ctx.translations
    form = SignatureForm.model_validate(submission.submission)
    request, errors = validate_signature_form(form, tr)
    if errors:
        return {"errors": errors}

    try:
        signature_html = render_signature(ctx, request)
    except (TemplateError, KeyError, ValueError) as e:
        logger.error(f"Failed to generate signature: {e}")
        return {"error": tr.error_generate_signature}

    try:
        file_id = upload_signature(ctx, submission.channel_id, request, signature_html)
    except PlatformError as e:
        logger.error(f"Failed to upload signature file: {e}")
        return {"error": tr.error_upload_signature}

    post_signature(ctx, submission.user_id, submission.channel_id, request, file_id)
    return {}


# =============================================================================
# Endpoints: Lifecycle
# =============================================================================


@router.post("/events/user-created", response_model=UserCreatedResponse)
async def handle_user_created(
    event: UserCreatedEvent,
    ctx: OnboardingContext = Depends(get_onboarding_context),
) -> UserCreatedResponse:
    """Start onboarding for a newly created user."""
    try:
        user = ctx.platform.get_user(event.user_id)
        started = start_onboarding_for_user(ctx, user)
    except (StoreError, PlatformError) as e:
        logger.error(f"Failed to start onboarding for {event.user_id}: {e}")
        started = False

    return UserCreatedResponse(user_id=event.user_id, started=started)
