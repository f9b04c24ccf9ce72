"""Configuration models for the SDK."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from eyes_fluent.fluent.check_settings import CheckSettings
from eyes_fluent.models.geometry import MatchLevel, RectangleSize, ScaleMethod


class SdkConfig(BaseModel):
    # Service
    server_url: str = "https://eyesapi.applitools.com"
    api_key: Optional[str] = None
    app_name: str = ""

    # Check defaults
    default_match_level: MatchLevel = MatchLevel.STRICT
    default_timeout_ms: Optional[int] = Field(default=None, ge=0)
    force_full_page_screenshot: bool = False

    # Capture
    scale_method: ScaleMethod = ScaleMethod.SPEED
    viewport: RectangleSize = Field(default_factory=lambda: RectangleSize(width=1280, height=720))

    @field_validator("api_key", mode="before")
    @classmethod
    def resolve_env_api_key(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and v.startswith("env:"):
            env_var = v[4:]
            resolved = os.environ.get(env_var)
            if resolved is None:
                raise ValueError(f"Environment variable '{env_var}' not set")
            return resolved
        return v

    def default_check_settings(self) -> CheckSettings:
        """Create check settings seeded with the configured defaults."""
        settings = CheckSettings().match_level(self.default_match_level)
        settings.fully(self.force_full_page_screenshot)
        if self.default_timeout_ms is not None:
            settings.timeout(self.default_timeout_ms)
        return settings

    @classmethod
    def load(cls, path: str | Path) -> "SdkConfig":
        """Load config from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = json.load(f)
        return cls(**data)

    def save(self, path: str | Path) -> None:
        """Save config to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)
