"""Configuration schema for denim."""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import BaseModel, Field

from ..bluejeans import DEFAULT_BASE_URL


class MeetingConfig(BaseModel):
    """Configuration for the meeting provider."""

    base_url: str = DEFAULT_BASE_URL


class FetchConfig(BaseModel):
    """Configuration for loading rooms from a URL."""

    timeout: float = Field(default=10.0, gt=0)


class ExportConfig(BaseModel):
    """Configuration for vCard export."""

    prefix: str = ""
    version: str = "3.0"
    filename: str = "rooms.vcf"


class DenimConfig(BaseModel):
    """Main configuration class for denim."""

    meeting: MeetingConfig = Field(default_factory=MeetingConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DenimConfig:
        """Create config from a parsed YAML mapping, ignoring unknown sections."""
        known = {key: data[key] for key in cls.model_fields if key in data}
        return cls.model_validate(known)

    def to_yaml(self) -> str:
        """Convert config to YAML string."""
        return yaml.safe_dump(
            self.model_dump(), sort_keys=False, default_flow_style=False
        )
