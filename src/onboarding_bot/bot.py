"""
Bot identity.

The bot's user id is resolved once at startup from its access token and then
handed to every component that posts as the bot. Profile and icon updates are
cosmetic: failures are logged and never block startup.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from onboarding_bot.config import Settings
from onboarding_bot.platform import PlatformAPI, PlatformError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BotIdentity:
    """Who the service posts as."""
    user_id: str
    username: str = ""


def resolve_bot_identity(platform: PlatformAPI, config: Settings) -> BotIdentity:
    """
    Look up the bot account behind MATTERMOST_BOT_TOKEN.

    Raises:
        PlatformError: The token is invalid or the server is unreachable
    """
    me = platform.get_me()
    if not me.is_bot:
        logger.warning(f"Token belongs to regular user '{me.username}', not a bot account")

    identity = BotIdentity(user_id=me.id, username=me.username)
    ensure_bot_profile(platform, identity, config)
    ensure_bot_icon(platform, identity, config)
    return identity


def ensure_bot_profile(platform: PlatformAPI, bot: BotIdentity, config: Settings) -> None:
    """Apply the configured display name and description."""
    try:
        platform.patch_bot(bot.user_id, config.bot_display_name, config.bot_description)
    except PlatformError as e:
        logger.warning(f"Failed to patch bot profile: {e}")


def ensure_bot_icon(platform: PlatformAPI, bot: BotIdentity, config: Settings) -> None:
    """Upload the bot icon if the configured file exists."""
    icon_path = Path(config.bot_icon_path)
    try:
        data = icon_path.read_bytes()
    except OSError as e:
        logger.debug(f"Bot icon not set; file not found: {icon_path} ({e})")
        return

    try:
        platform.set_profile_image(bot.user_id, data)
    except PlatformError as e:
        logger.warning(f"Failed to set bot icon: {e}")
