"""SQLAlchemy database models for StudyWell."""

from datetime import datetime
import uuid
from sqlalchemy import Column, String, Integer, Boolean, DateTime, CheckConstraint

from studywell.database.database import Base


class TaskDB(Base):
    """Database model for Task."""

    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint("importance BETWEEN 1 AND 5", name="ck_tasks_importance"),
    )

    # Primary key
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))

    # Basic fields
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    importance = Column(Integer, nullable=False, default=3)
    is_done = Column(Boolean, nullable=False, default=False, index=True)

    # Scheduling fields
    due_date = Column(DateTime, nullable=True, index=True)
    estimate_min = Column(Integer, nullable=True)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from studywell.models.task import Task

        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            estimate_min=self.estimate_min,
            importance=self.importance,
            is_done=self.is_done,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_pydantic(cls, task):
        """Create database model from Pydantic model."""
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            estimate_min=task.estimate_min,
            importance=task.importance,
            is_done=task.is_done,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class DailyHealthDB(Base):
    """Database model for DailyHealthRecord.

    `date` is the natural key: at most one row per civil day.
    """

    __tablename__ = "daily_health"
    __table_args__ = (
        CheckConstraint("condition BETWEEN 1 AND 3", name="ck_daily_health_condition"),
    )

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    date = Column(DateTime, nullable=False, unique=True, index=True)
    condition = Column(Integer, nullable=False)
    note = Column(String, nullable=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from studywell.models.health import DailyHealthRecord
        return DailyHealthRecord(
            id=self.id,
            date=self.date,
            condition=self.condition,
            note=self.note,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class MoodLogDB(Base):
    """Database model for MoodLogEntry (append-only)."""

    __tablename__ = "mood_logs"
    __table_args__ = (
        CheckConstraint("mood BETWEEN 1 AND 5", name="ck_mood_logs_mood"),
    )

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    at = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    mood = Column(Integer, nullable=False)
    note = Column(String, nullable=True)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from studywell.models.health import MoodLogEntry
        return MoodLogEntry(
            id=self.id,
            at=self.at,
            mood=self.mood,
            note=self.note,
        )
