"""BlueJeans meeting references."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

DEFAULT_BASE_URL = "https://bluejeans.com"


class Meeting(BaseModel):
    """A BlueJeans meeting identified by its numeric meeting id."""

    model_config = ConfigDict(frozen=True)

    id: str
    base_url: str = DEFAULT_BASE_URL

    @property
    def url(self) -> str:
        """Dialable meeting URL."""
        return f"{self.base_url.rstrip('/')}/{self.id}"


def new(identifier: str, base_url: str = DEFAULT_BASE_URL) -> Meeting:
    """Create a meeting reference from a raw identifier."""
    return Meeting(id=identifier, base_url=base_url)
