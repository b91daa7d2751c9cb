"""
EOTO Email Signature Generator.

Fills one of the static HTML layouts in templates/ with the values from a
SignatureRequest. Each ProjectCategory has exactly one layout; the layouts
are loaded and checked once (load_templates) so that a broken template is a
startup failure rather than a user-facing error.

Placeholders use string.Template syntax: ${full_name}, ${pronouns},
${position}, ${email}, ${work_number}.
"""

import html
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from string import Template

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

PLACEHOLDERS = ("full_name", "pronouns", "position", "email", "work_number")
WORK_NUMBER_PLACEHOLDER = "${work_number}"

NO_PRONOUNS_SENTINELS = {"keine pronomen", "no pronouns"}
PRONOUN_SEPARATOR = " / "


class TemplateError(Exception):
    """A signature template is missing or malformed."""


class ProjectCategory(str, Enum):
    """EOTO projects; selects the signature layout and branding."""
    EACH_ONE = "each-one"
    COMMUNITY = "community"
    CUZ = "cuz"
    JUGEND = "jugend"
    NAR = "nar"
    AFROLUTION = "afrolution"

    @property
    def template_file(self) -> str:
        return f"{self.value}.html"


DEFAULT_PROJECT = ProjectCategory.EACH_ONE


@dataclass(frozen=True)
class SignatureRequest:
    """Validated signature form data (see forms.py)."""
    full_name: str
    position: str
    email: str
    project: ProjectCategory
    pronouns: str = ""
    work_number: str = ""


# =============================================================================
# Template Loading
# =============================================================================

_TEMPLATES: dict[ProjectCategory, str] | None = None


def _check_template(project: ProjectCategory, text: str) -> None:
    template = Template(text)
    if not template.is_valid():
        raise TemplateError(f"{project.template_file}: invalid placeholder syntax")

    identifiers = set(template.get_identifiers())
    missing = set(PLACEHOLDERS) - identifiers
    unknown = identifiers - set(PLACEHOLDERS)
    if missing:
        raise TemplateError(f"{project.template_file}: missing placeholders {sorted(missing)}")
    if unknown:
        raise TemplateError(f"{project.template_file}: unknown placeholders {sorted(unknown)}")

    # Phone suppression drops whole lines, so the phone must sit on its own line
    for line in text.splitlines():
        if WORK_NUMBER_PLACEHOLDER in line and line.strip() != WORK_NUMBER_PLACEHOLDER:
            raise TemplateError(f"{project.template_file}: ${{work_number}} must be alone on its line")


def load_templates(directory: Path = TEMPLATES_DIR) -> dict[ProjectCategory, str]:
    """
    Read and validate the layout for every project.

    Raises:
        TemplateError: A project has no layout, or a layout is malformed
    """
    templates: dict[ProjectCategory, str] = {}
    for project in ProjectCategory:
        path = directory / project.template_file
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateError(f"no signature template for {project.value}: {e}") from e
        _check_template(project, text)
        templates[project] = text

    logger.info(f"Loaded {len(templates)} signature templates from {directory}")
    return templates


def get_templates() -> dict[ProjectCategory, str]:
    """Load templates once per process."""
    global _TEMPLATES
    if _TEMPLATES is None:
        _TEMPLATES = load_templates()
    return _TEMPLATES


# =============================================================================
# Rendering
# =============================================================================

def format_pronouns(pronouns: str) -> str:
    """
    Expand a "first / second" pronoun pair into the bilingual phrase.

    "er/ihm / he/him"              -> "Pronomen er/ihm - pronouns he/him"
    "Keine Pronomen / No Pronouns" -> unchanged
    anything else                  -> unchanged
    """
    if not pronouns:
        return ""

    parts = pronouns.split(PRONOUN_SEPARATOR)
    if len(parts) != 2:
        return pronouns

    first, second = parts[0].strip(), parts[1].strip()
    if first.lower() in NO_PRONOUNS_SENTINELS or second.lower() in NO_PRONOUNS_SENTINELS:
        return pronouns

    return f"Pronomen {first} - pronouns {second}"


def _strip_work_number_line(text: str) -> str:
    """Drop the phone placeholder line and all blank lines."""
    return "\n".join(
        line for line in text.splitlines()
        if WORK_NUMBER_PLACEHOLDER not in line and line.strip()
    )


def generate_signature(
    request: SignatureRequest,
    templates: dict[ProjectCategory, str] | None = None,
) -> str:
    """
    Render the HTML signature for a request.

    Values are HTML-escaped. An empty work number removes its line entirely;
    a present one is followed by a line break.
    """
    templates = templates if templates is not None else get_templates()
    text = templates[request.project]

    work_number = request.work_number.strip()
    if not work_number:
        text = _strip_work_number_line(text)

    values = {
        "full_name": html.escape(request.full_name),
        "pronouns": html.escape(format_pronouns(request.pronouns)),
        "position": html.escape(request.position),
        "email": html.escape(request.email),
        "work_number": f"{html.escape(work_number)}<br>" if work_number else "",
    }
    return Template(text).substitute(values)


def signature_filename(full_name: str, project: ProjectCategory) -> str:
    """File name for the uploaded signature: Max_Mustermann_each-one_Signatur.html"""
    return f"{full_name.strip().replace(' ', '_')}_{project.value}_Signatur.html"
