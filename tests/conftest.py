"""
Pytest configuration and fixtures for the onboarding helper tests.
"""

import os

import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

# Set test environment before importing project modules
os.environ["ONBOARDING_ENV"] = "development"
os.environ["KV_BACKEND"] = "memory"

from onboarding.context import OnboardingContext
from onboarding.signature import load_templates
from onboarding.store import StateStore
from onboarding_bot.bot import BotIdentity
from onboarding_bot.config import Settings
from onboarding_bot.db import InMemoryKVStore
from onboarding_bot.platform import (
    PlatformChannel,
    PlatformError,
    PlatformTeam,
    PlatformUser,
)
from onboarding_bot.web.app import create_app

BOT_USER_ID = "bot-user-id"


class FakePlatform:
    """
    In-memory stand-in for MattermostClient.

    Records every write; add a method name to `failing` to make it raise
    PlatformError.
    """

    def __init__(self):
        self.users: dict[str, PlatformUser] = {}
        self.teams: dict[str, list[PlatformTeam]] = {}
        self.posts: list[dict] = []
        self.uploads: list[dict] = []
        self.dialogs: list[dict] = []
        self.bot_patches: list[dict] = []
        self.profile_images: list[str] = []
        self.failing: set[str] = set()

    def _check(self, name: str) -> None:
        if name in self.failing:
            raise PlatformError(f"{name} failed", status_code=500)

    def add_user(self, user: PlatformUser, team: str | None = None) -> PlatformUser:
        self.users[user.id] = user
        if team:
            self.teams[user.id] = [PlatformTeam(id=f"team-{user.id}", display_name=team)]
        return user

    def get_me(self) -> PlatformUser:
        self._check("get_me")
        return PlatformUser(id=BOT_USER_ID, username="eoto-onboarding-bot", is_bot=True)

    def get_user(self, user_id: str) -> PlatformUser:
        self._check("get_user")
        if user_id not in self.users:
            raise PlatformError(f"user {user_id} not found", status_code=404)
        return self.users[user_id]

    def get_teams_for_user(self, user_id: str) -> list[PlatformTeam]:
        self._check("get_teams_for_user")
        return self.teams.get(user_id, [])

    def get_direct_channel(self, user_id: str, other_user_id: str) -> PlatformChannel:
        self._check("get_direct_channel")
        return PlatformChannel(id=f"dm-{other_user_id}", type="D")

    def create_post(self, post: dict) -> dict:
        self._check("create_post")
        self.posts.append(post)
        return {"id": f"post-{len(self.posts)}", **post}

    def upload_file(self, channel_id: str, filename: str, content: bytes) -> str:
        self._check("upload_file")
        self.uploads.append({"channel_id": channel_id, "filename": filename, "content": content})
        return f"file-{len(self.uploads)}"

    def open_interactive_dialog(self, request: dict) -> None:
        self._check("open_interactive_dialog")
        self.dialogs.append(request)

    def patch_bot(self, bot_user_id: str, display_name: str, description: str) -> None:
        self._check("patch_bot")
        self.bot_patches.append({
            "bot_user_id": bot_user_id,
            "display_name": display_name,
            "description": description,
        })

    def set_profile_image(self, user_id: str, image: bytes) -> None:
        self._check("set_profile_image")
        self.profile_images.append(user_id)


@pytest.fixture
def settings():
    """English settings with a callback URL derived from the site URL."""
    return Settings(
        _env_file=None,
        mattermost_url="https://chat.example.org",
        mattermost_bot_token="test-token",
        bot_language="en",
        kv_backend="memory",
    )


@pytest.fixture
def kv():
    return InMemoryKVStore()


@pytest.fixture
def store(kv):
    return StateStore(kv)


@pytest.fixture
def platform():
    fake = FakePlatform()
    fake.add_user(
        PlatformUser(
            id="user-1",
            username="ada",
            first_name="Ada",
            last_name="Lovelace",
            email="ada@eoto-archiv.de",
        ),
        team="EOTO",
    )
    return fake


@pytest.fixture
def templates():
    return load_templates()


@pytest.fixture
def ctx(store, platform, settings, templates):
    return OnboardingContext(
        store=store,
        platform=platform,
        bot=BotIdentity(user_id=BOT_USER_ID, username="eoto-onboarding-bot"),
        settings=settings,
        templates=templates,
    )


@pytest.fixture
def client(ctx):
    """HTTP client against the app wired to the fake platform."""
    with TestClient(create_app(ctx)) as test_client:
        yield test_client


@pytest.fixture
def mock_supabase():
    """Mock Supabase client for KV store tests."""
    mock_client = MagicMock()

    mock_table = MagicMock()
    mock_table.select.return_value = mock_table
    mock_table.upsert.return_value = mock_table
    mock_table.eq.return_value = mock_table
    mock_table.limit.return_value = mock_table
    mock_table.execute.return_value = MagicMock(data=[])

    mock_client.table.return_value = mock_table

    return mock_client


@pytest.fixture
def signature_submission():
    """A complete, valid dialog submission."""
    return {
        "full_name": "Ada Lovelace",
        "position": "Projektkoordinatorin",
        "pronouns": "sie/ihr / she/her",
        "email": "ada@eoto-archiv.de",
        "project": "cuz",
        "work_number": "Tel.: 030 555",
    }
