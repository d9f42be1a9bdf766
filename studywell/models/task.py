"""Task data model for StudyWell."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from studywell.models.constants import DEFAULT_IMPORTANCE, MAX_IMPORTANCE, MIN_IMPORTANCE


class Task(BaseModel):
    """Canonical Task model."""

    id: str = Field(..., description="Unique task identifier (UUID v4)")
    title: str = Field(..., min_length=1, description="Task title (trimmed, non-empty)")
    description: Optional[str] = Field(None, description="Task description")
    due_date: Optional[datetime] = Field(None, description="Deadline instant (naive UTC); null means no deadline")
    estimate_min: Optional[int] = Field(None, ge=0, description="Estimated effort in minutes; null means unestimated")
    importance: int = Field(
        DEFAULT_IMPORTANCE, ge=MIN_IMPORTANCE, le=MAX_IMPORTANCE, description="Importance (1-5)"
    )
    is_done: bool = Field(False, description="Whether the task is completed")
    created_at: datetime = Field(..., description="Task creation timestamp")
    updated_at: datetime = Field(..., description="Task last update timestamp")

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True
