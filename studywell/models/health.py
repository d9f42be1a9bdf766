"""Health and mood journal models for StudyWell."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from studywell.models.constants import CONDITION_BAD, CONDITION_GOOD, MAX_MOOD, MIN_MOOD


class DailyHealthRecord(BaseModel):
    """One health condition record per civil day."""

    id: str = Field(..., description="Unique record identifier (UUID v4)")
    date: datetime = Field(..., description="Instant of 00:00 UTC+9 of the recorded day (naive UTC)")
    condition: int = Field(..., ge=CONDITION_BAD, le=CONDITION_GOOD, description="1=bad, 2=normal, 3=good")
    note: Optional[str] = Field(None, description="Free-text note")
    created_at: datetime = Field(..., description="Record creation timestamp")
    updated_at: datetime = Field(..., description="Record last update timestamp")

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True


class MoodLogEntry(BaseModel):
    """A single mood entry; any number per day."""

    id: str = Field(..., description="Unique entry identifier (UUID v4)")
    at: datetime = Field(..., description="Instant the mood was recorded (naive UTC)")
    mood: int = Field(..., ge=MIN_MOOD, le=MAX_MOOD, description="1 (worst) to 5 (best)")
    note: Optional[str] = Field(None, description="Free-text note")

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True
