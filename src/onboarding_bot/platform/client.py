"""
Mattermost REST client.

Thin synchronous wrapper over the v4 API with the bot's access token.
Every failure (transport error or non-2xx response) surfaces as
PlatformError; callers decide whether to log, degrade or fail the request.
"""

import logging
from typing import Any, Protocol

import httpx

from onboarding_bot.platform.models import PlatformChannel, PlatformTeam, PlatformUser

logger = logging.getLogger(__name__)


class PlatformError(Exception):
    """A Mattermost API call failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class PlatformAPI(Protocol):
    """Platform operations used by the onboarding flow."""

    def get_me(self) -> PlatformUser: ...

    def get_user(self, user_id: str) -> PlatformUser: ...

    def get_teams_for_user(self, user_id: str) -> list[PlatformTeam]: ...

    def get_direct_channel(self, user_id: str, other_user_id: str) -> PlatformChannel: ...

    def create_post(self, post: dict[str, Any]) -> dict[str, Any]: ...

    def upload_file(self, channel_id: str, filename: str, content: bytes) -> str: ...

    def open_interactive_dialog(self, request: dict[str, Any]) -> None: ...

    def patch_bot(self, bot_user_id: str, display_name: str, description: str) -> None: ...

    def set_profile_image(self, user_id: str, image: bytes) -> None: ...


class MattermostClient:
    """
    Mattermost API v4 client.

    Usage:
        client = MattermostClient("https://chat.example.org", token)
        user = client.get_user(user_id)
    """

    def __init__(
        self,
        site_url: str,
        token: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._http = httpx.Client(
            base_url=f"{site_url.rstrip('/')}/api/v4",
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise PlatformError(f"{method} {path}: {e}") from e

        logger.debug(f"{method} {path} -> {response.status_code}")

        if response.is_error:
            # Mattermost error bodies carry a human readable "message"
            try:
                detail = response.json().get("message", response.text)
            except (ValueError, AttributeError):
                detail = response.text
            raise PlatformError(
                f"{method} {path}: {response.status_code} {detail}",
                status_code=response.status_code,
            )
        return response

    # =========================================================================
    # Users & Teams
    # =========================================================================

    def get_me(self) -> PlatformUser:
        return PlatformUser.model_validate(self._request("GET", "/users/me").json())

    def get_user(self, user_id: str) -> PlatformUser:
        return PlatformUser.model_validate(self._request("GET", f"/users/{user_id}").json())

    def get_teams_for_user(self, user_id: str) -> list[PlatformTeam]:
        data = self._request("GET", f"/users/{user_id}/teams").json()
        return [PlatformTeam.model_validate(t) for t in data or []]

    # =========================================================================
    # Channels & Posts
    # =========================================================================

    def get_direct_channel(self, user_id: str, other_user_id: str) -> PlatformChannel:
        """Get or create the DM channel between two users."""
        data = self._request("POST", "/channels/direct", json=[user_id, other_user_id]).json()
        return PlatformChannel.model_validate(data)

    def create_post(self, post: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/posts", json=post).json()

    def upload_file(self, channel_id: str, filename: str, content: bytes) -> str:
        """Upload a file to a channel and return its file id."""
        response = self._request(
            "POST",
            "/files",
            data={"channel_id": channel_id},
            files={"files": (filename, content, "text/html")},
        )
        infos = response.json().get("file_infos") or []
        if not infos:
            raise PlatformError(f"upload of {filename} returned no file info")
        return infos[0]["id"]

    def open_interactive_dialog(self, request: dict[str, Any]) -> None:
        self._request("POST", "/actions/dialogs/open", json=request)

    # =========================================================================
    # Bot profile
    # =========================================================================

    def patch_bot(self, bot_user_id: str, display_name: str, description: str) -> None:
        self._request(
            "PUT",
            f"/bots/{bot_user_id}",
            json={"display_name": display_name, "description": description},
        )

    def set_profile_image(self, user_id: str, image: bytes) -> None:
        self._request(
            "POST",
            f"/users/{user_id}/image",
            files={"image": ("icon.png", image, "image/png")},
        )
