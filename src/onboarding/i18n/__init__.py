"""
Onboarding Translations.

All user-facing text for the checklist, the signature dialog and the
follow-up messages. One Translations table per language; the active one is
chosen by the BOT_LANGUAGE setting (German by default).

Every table must cover every OnboardingStep and ProjectCategory; this is
checked when the module is imported.
"""

from dataclasses import dataclass
from enum import Enum

from ..signature import ProjectCategory
from ..state import OnboardingStep


class Language(str, Enum):
    DE = "de"
    EN = "en"


DEFAULT_LANGUAGE = Language.DE


@dataclass(frozen=True)
class StepText:
    """Checklist text for one step."""
    title: str
    description: str
    link: str
    button: str


@dataclass(frozen=True)
class Translations:
    language: Language

    # Welcome message ({name}, {team})
    welcome_greeting: str
    welcome_intro: str
    welcome_closing: str

    steps: dict[OnboardingStep, StepText]
    button_generate_signature: str

    # Signature dialog
    dialog_title: str
    dialog_intro: str
    dialog_full_name: str
    dialog_full_name_help: str
    dialog_position: str
    dialog_position_help: str
    dialog_pronouns: str
    dialog_pronouns_placeholder: str
    dialog_pronouns_help: str
    dialog_email: str
    dialog_email_help: str
    dialog_project: str
    dialog_project_help: str
    dialog_work_number: str
    dialog_work_number_placeholder: str
    dialog_work_number_help: str
    dialog_submit: str

    projects: dict[ProjectCategory, str]

    # Signature result ({name}, {project})
    signature_generated_title: str
    signature_generated_message: str
    signature_instructions_title: str
    signature_instructions_outlook: str
    signature_instructions_thunderbird: str
    signature_project_footer: str

    # Notes ({step})
    step_marked_complete: str
    dialog_opening: str

    # Field validation, keyed by dialog element name
    field_required: dict[str, str]
    project_invalid: str

    # Errors
    error_general: str
    error_generate_signature: str
    error_upload_signature: str

    def step(self, step: OnboardingStep) -> StepText:
        return self.steps[step]

    def project_name(self, project: ProjectCategory) -> str:
        return self.projects[project]


from .de import TRANSLATIONS_DE  # noqa: E402
from .en import TRANSLATIONS_EN  # noqa: E402

TRANSLATIONS: dict[Language, Translations] = {
    Language.DE: TRANSLATIONS_DE,
    Language.EN: TRANSLATIONS_EN,
}


def _check_complete(table: Translations) -> None:
    missing_steps = set(OnboardingStep) - set(table.steps)
    missing_projects = set(ProjectCategory) - set(table.projects)
    if missing_steps or missing_projects:
        raise RuntimeError(
            f"translations '{table.language.value}' incomplete: "
            f"steps={sorted(s.value for s in missing_steps)} "
            f"projects={sorted(p.value for p in missing_projects)}"
        )


for _table in TRANSLATIONS.values():
    _check_complete(_table)


def get_translations(language: str | None) -> Translations:
    """Translations for a language code; unknown codes fall back to German."""
    try:
        return TRANSLATIONS[Language((language or "").strip().lower())]
    except ValueError:
        return TRANSLATIONS[DEFAULT_LANGUAGE]


__all__ = [
    "Language",
    "StepText",
    "Translations",
    "get_translations",
]
