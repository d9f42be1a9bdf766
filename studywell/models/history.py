"""Aggregated history view models for StudyWell."""

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from studywell.models.health import DailyHealthRecord, MoodLogEntry


class HistoryRow(BaseModel):
    """Everything recorded on one civil day."""

    day: date
    health: Optional[DailyHealthRecord] = None
    condition_label: str = "—"
    moods: List[MoodLogEntry] = Field(default_factory=list)
    mood_emojis: List[str] = Field(default_factory=list)
    average_mood: Optional[float] = Field(None, description="Mean mood of the day; null when no entries")
    has_any_note: bool = False

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True


class ConditionCounts(BaseModel):
    good: int = 0
    normal: int = 0
    bad: int = 0


class HistorySummary(BaseModel):
    """Trailing-window summary shown above the history table."""

    window_days: int
    average_mood: Optional[float] = Field(None, description="Mean of daily averages; null when no mood data")
    condition_counts: ConditionCounts = Field(default_factory=ConditionCounts)

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True
