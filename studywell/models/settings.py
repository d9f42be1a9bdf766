"""Display settings for StudyWell.

The server owns the defaults (from the environment); a client sends a partial
override and gets back the merged, validated settings. Merging never mutates
either input.
"""

import os
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from dotenv import load_dotenv

from studywell.models.constants import DEFAULT_SNOOZE_DAYS, MAX_SNOOZE_DAYS

load_dotenv()

HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


class Theme(str, Enum):
    """UI theme enumeration."""
    LIGHT = "light"
    DARK = "dark"


class DisplaySettings(BaseModel):
    """Presentation-layer configuration passed in at render time."""

    theme: Theme = Field(Theme.LIGHT, description="Color theme")
    highlight_color: str = Field("#ef4444", pattern=HEX_COLOR_PATTERN, description="Highlight color (#RRGGBB)")
    snooze_days: int = Field(
        DEFAULT_SNOOZE_DAYS, ge=1, le=MAX_SNOOZE_DAYS, description="Days used by the quick snooze action"
    )

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True
        use_enum_values = True

    def merge(self, patch: Dict[str, Any]) -> "DisplaySettings":
        """Return a new settings object with the patch applied.

        Keys may use wire (camelCase) or field names. Unknown keys and null
        values are ignored; invalid values raise pydantic's ValidationError.
        """
        merged = self.model_dump()
        for key, value in patch.items():
            field_name = _FIELD_BY_ALIAS.get(key, key)
            if field_name in merged and value is not None:
                merged[field_name] = value
        return DisplaySettings(**merged)

    def highlight_background(self, alpha: float = 0.16) -> str:
        """Highlight color as a translucent `rgba(...)` background."""
        hex_value = self.highlight_color.lstrip("#")
        r, g, b = (int(hex_value[i:i + 2], 16) for i in (0, 2, 4))
        return f"rgba({r}, {g}, {b}, {alpha})"


_FIELD_BY_ALIAS = {to_camel(name): name for name in DisplaySettings.model_fields}


def default_settings(overrides: Optional[Dict[str, Any]] = None) -> DisplaySettings:
    """Server-side defaults, optionally taken from the environment."""
    env_values: Dict[str, Any] = {}
    if os.getenv("STUDYWELL_THEME"):
        env_values["theme"] = os.getenv("STUDYWELL_THEME")
    if os.getenv("STUDYWELL_HIGHLIGHT_COLOR"):
        env_values["highlight_color"] = os.getenv("STUDYWELL_HIGHLIGHT_COLOR")
    if os.getenv("STUDYWELL_SNOOZE_DAYS"):
        env_values["snooze_days"] = int(os.getenv("STUDYWELL_SNOOZE_DAYS"))
    return DisplaySettings().merge({**env_values, **(overrides or {})})
