"""Request and response models for the StudyWell API."""

from datetime import datetime
from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from studywell.models.task import Task


class _WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True


def _blank_to_none(value: Any) -> Any:
    # HTML forms send "" for untouched optional inputs.
    if isinstance(value, str) and not value.strip():
        return None
    return value


class HealthSubmitRequest(_WireModel):
    """Body of POST /health."""
    condition: Any = Field(None, description="1-3, 良い/普通/悪い or good/normal/bad")
    note: Optional[str] = None
    day_jst: Optional[str] = Field(None, description="Civil day (YYYY-MM-DD, UTC+9); defaults to today")


class MoodSubmitRequest(_WireModel):
    """Body of POST /mood."""
    mood: Any = Field(None, description="1-5, emoji or very_bad..very_good")
    note: Optional[str] = None


class TaskCreateRequest(_WireModel):
    """Body of POST /tasks."""
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    estimate_min: Optional[int] = None
    importance: Optional[int] = None

    @field_validator("due_date", "estimate_min", "importance", mode="before")
    @classmethod
    def blank_is_missing(cls, value: Any) -> Any:
        return _blank_to_none(value)


class TaskUpdateRequest(TaskCreateRequest):
    """Body of PUT /tasks/{task_id}: a full replacement (title and importance required)."""
    is_done: Optional[bool] = None


class SnoozeRequest(_WireModel):
    """Body of POST /tasks/{task_id}/snooze."""
    days: Any = Field(None, description="Days to push the due date (default 1, clamped to 1-30)")


class TaskListResponse(BaseModel):
    tasks: List[Task]
    count: int


class ScoredTaskResponse(_WireModel):
    """A dashboard recommendation."""
    task: Task
    score: float
    health_coef: float
    mood_coef: float
    due_coef: float
    due_status: str


class DashboardResponse(_WireModel):
    today: str
    condition: Optional[int] = None
    mood: Optional[int] = None
    tasks: List[ScoredTaskResponse]
