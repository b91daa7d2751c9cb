"""
Onboarding Context.

Everything a handler needs, resolved once at startup and passed explicitly:
state store, platform client, bot identity, settings and signature templates.
"""

from dataclasses import dataclass

from onboarding_bot.bot import BotIdentity
from onboarding_bot.config import Settings
from onboarding_bot.platform import PlatformAPI

from .i18n import Translations, get_translations
from .signature import ProjectCategory
from .store import StateStore


@dataclass(frozen=True)
class OnboardingContext:
    store: StateStore
    platform: PlatformAPI
    bot: BotIdentity
    settings: Settings
    templates: dict[ProjectCategory, str]

    @property
    def translations(self) -> Translations:
        return get_translations(self.settings.bot_language)

    def base_url(self) -> str:
        """
        Callback base URL for buttons and dialogs.

        Raises:
            ConfigurationError: No public or site URL configured
        """
        return self.settings.callback_base_url()
