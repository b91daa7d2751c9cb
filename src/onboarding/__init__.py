"""
EOTO Onboarding.

New teammates get a DM from the bot with a six-step checklist. Each step has
a button that marks it done; the profile step also opens a dialog that
generates a branded HTML email signature.

Modules:
- state / store: per-user checklist record and its persistence
- checklist: welcome message and attachment rendering
- forms / signature: signature dialog, validation and HTML generation
- flow / api: the operations and the HTTP callbacks that drive them
"""

from .state import OnboardingState, OnboardingStep
from .signature import ProjectCategory, SignatureRequest

__all__ = [
    "OnboardingState",
    "OnboardingStep",
    "ProjectCategory",
    "SignatureRequest",
]
