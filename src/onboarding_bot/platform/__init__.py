"""
Onboarding Helper - Chat platform access.

Mattermost REST client and the models it returns.
"""

from onboarding_bot.platform.client import MattermostClient, PlatformAPI, PlatformError
from onboarding_bot.platform.models import PlatformChannel, PlatformTeam, PlatformUser

__all__ = [
    "MattermostClient",
    "PlatformAPI",
    "PlatformError",
    "PlatformChannel",
    "PlatformTeam",
    "PlatformUser",
]
