"""Task creation factory for StudyWell.

This module centralizes task creation logic so every path applies the same
defaults.
"""

import uuid
from datetime import datetime
from typing import Optional

from studywell.models.task import Task
from studywell.models.constants import DEFAULT_IMPORTANCE


def create_task_base(
    title: str,
    description: Optional[str] = None,
    due_date: Optional[datetime] = None,
    estimate_min: Optional[int] = None,
    importance: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Task:
    """Create an open task with defaults applied.

    Args:
        title: Task title, already trimmed and validated
        description: Optional description
        due_date: Deadline instant (naive UTC)
        estimate_min: Estimated minutes
        importance: Importance 1-5 (defaults to 3)
        now: Creation timestamp override (defaults to utcnow)

    Returns:
        Task object with defaults applied
    """
    now = now or datetime.utcnow()
    return Task(
        id=str(uuid.uuid4()),
        title=title,
        description=description,
        due_date=due_date,
        estimate_min=estimate_min,
        importance=importance if importance is not None else DEFAULT_IMPORTANCE,
        is_done=False,
        created_at=now,
        updated_at=now,
    )
