"""
Signature Form - dialog definition and validation.

The signature dialog collects:
- full_name, position, email, project (required)
- pronouns, work_number (optional)

Missing required fields are reported back to the dialog per field; they are
the submitter's problem, not a fault of the service.
"""

import logging
from typing import Any

from pydantic import BaseModel, field_validator

from onboarding_bot.platform import PlatformUser

from .i18n import Translations
from .signature import DEFAULT_PROJECT, ProjectCategory, SignatureRequest

logger = logging.getLogger(__name__)

SUBMIT_SIGNATURE_PATH = "/submit-signature"
SIGNATURE_DIALOG_CALLBACK_ID = "eoto_signature"

REQUIRED_FIELDS = ("full_name", "position", "email", "project")


# =============================================================================
# Form Model
# =============================================================================

class SignatureForm(BaseModel):
    """
    Raw dialog submission.

    Every field arrives as whatever the platform sent; values are coerced to
    stripped strings and checked by validate_signature_form.
    """

    full_name: str = ""
    position: str = ""
    pronouns: str = ""
    email: str = ""
    project: str = ""
    work_number: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> str:
        """Treat None as empty, stringify anything else, trim whitespace."""
        if v is None:
            return ""
        return str(v).strip()


def validate_signature_form(
    form: SignatureForm,
    tr: Translations,
) -> tuple[SignatureRequest | None, dict[str, str]]:
    """
    Validate a submission.

    Returns:
        (request, errors) - request is None whenever errors is non-empty.
        errors maps dialog element names to localized messages.
    """
    errors: dict[str, str] = {}

    for name in REQUIRED_FIELDS:
        if not getattr(form, name):
            errors[name] = tr.field_required[name]

    project: ProjectCategory | None = None
    if form.project:
        try:
            project = ProjectCategory(form.project)
        except ValueError:
            logger.info(f"Unknown project submitted: {form.project}")
            errors["project"] = tr.project_invalid

    if errors or project is None:
        return None, errors

    return SignatureRequest(
        full_name=form.full_name,
        position=form.position,
        email=form.email,
        project=project,
        pronouns=form.pronouns,
        work_number=form.work_number,
    ), {}


# =============================================================================
# Dialog Definition
# =============================================================================

def get_project_options(tr: Translations) -> list[dict]:
    """Select options for the project element, in enumeration order."""
    return [
        {"text": tr.project_name(project), "value": project.value}
        for project in ProjectCategory
    ]


def build_signature_dialog(tr: Translations, user: PlatformUser) -> dict:
    """
    Dialog definition for the signature form, pre-filled from the user.

    Returns the "dialog" object of an actions/dialogs/open request.
    """
    return {
        "callback_id": SIGNATURE_DIALOG_CALLBACK_ID,
        "title": tr.dialog_title,
        "introduction_text": tr.dialog_intro,
        "elements": [
            {
                "display_name": tr.dialog_full_name,
                "name": "full_name",
                "type": "text",
                "placeholder": "Max Mustermann",
                "default": user.full_name,
                "help_text": tr.dialog_full_name_help,
            },
            {
                "display_name": tr.dialog_position,
                "name": "position",
                "type": "text",
                "placeholder": "Projektkoordinator*in",
                "help_text": tr.dialog_position_help,
            },
            {
                "display_name": tr.dialog_pronouns,
                "name": "pronouns",
                "type": "text",
                "placeholder": tr.dialog_pronouns_placeholder,
                "optional": True,
                "help_text": tr.dialog_pronouns_help,
            },
            {
                "display_name": tr.dialog_email,
                "name": "email",
                "type": "text",
                "subtype": "email",
                "default": user.email,
                "help_text": tr.dialog_email_help,
            },
            {
                "display_name": tr.dialog_project,
                "name": "project",
                "type": "select",
                "help_text": tr.dialog_project_help,
                "options": get_project_options(tr),
                "default": DEFAULT_PROJECT.value,
            },
            {
                "display_name": tr.dialog_work_number,
                "name": "work_number",
                "type": "text",
                "subtype": "tel",
                "optional": True,
                "placeholder": tr.dialog_work_number_placeholder,
                "help_text": tr.dialog_work_number_help,
            },
        ],
        "submit_label": tr.dialog_submit,
        "notify_on_cancel": False,
    }


def build_open_dialog_request(
    tr: Translations,
    user: PlatformUser,
    trigger_id: str,
    base_url: str,
) -> dict:
    """Full actions/dialogs/open request body."""
    return {
        "trigger_id": trigger_id,
        "url": f"{base_url}{SUBMIT_SIGNATURE_PATH}",
        "dialog": build_signature_dialog(tr, user),
    }
