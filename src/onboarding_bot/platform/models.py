"""
Mattermost API models.

Only the fields this service reads are declared; everything else in the
API payloads is ignored.
"""

from pydantic import BaseModel, ConfigDict


class PlatformUser(BaseModel):
    """A Mattermost user (GET /users/{id})."""

    model_config = ConfigDict(extra="ignore")

    id: str
    username: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    is_bot: bool = False

    @property
    def full_name(self) -> str:
        """First and last name joined, empty when neither is set."""
        return " ".join(p for p in (self.first_name, self.last_name) if p)

    @property
    def display_name(self) -> str:
        return self.full_name or self.username


class PlatformTeam(BaseModel):
    """A Mattermost team (GET /users/{id}/teams)."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str = ""
    display_name: str = ""


class PlatformChannel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    type: str = ""
