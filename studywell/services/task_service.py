"""Task lifecycle operations for StudyWell.

State machine per task:
    Open --mark_done--> Done
    Open --snooze(days)--> Open (due date pushed forward)
    Open|Done --update--> Open|Done
    Open|Done --delete--> removed

Every mutation invalidates the views that list tasks.
"""

import logging
import math
from datetime import datetime, timedelta
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from studywell.database.record_repository import HealthRepository, MoodRepository
from studywell.database.repository import TaskRepository
from studywell.engine.civil_time import to_utc_naive, today_key, utc_now
from studywell.engine.ranking import ScoredTask, list_order, rank_by_score
from studywell.errors import NotFound, ValidationError
from studywell.models.constants import (
    DASHBOARD_TOP_N,
    DEFAULT_SNOOZE_DAYS,
    MAX_IMPORTANCE,
    MAX_SNOOZE_DAYS,
    MIN_IMPORTANCE,
)
from studywell.models.task import Task
from studywell.models.task_factory import create_task_base
from studywell.services.storage import storage_guard
from studywell.services.view_cache import TASK_VIEWS, ViewCache

logger = logging.getLogger(__name__)

STATUS_OPEN = "open"
STATUS_DONE = "done"
SORT_DEFAULT = "default"
SORT_SCORE = "score"


def clean_title(title: Any) -> str:
    """Trimmed title, or ValidationError if missing or blank."""
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Title is required and must be a non-empty string.")
    return title.strip()


def check_importance(importance: Any) -> int:
    if isinstance(importance, bool) or not isinstance(importance, int):
        raise ValidationError("Importance must be an integer between 1 and 5.")
    if not MIN_IMPORTANCE <= importance <= MAX_IMPORTANCE:
        raise ValidationError("Importance must be an integer between 1 and 5.")
    return importance


def check_estimate(estimate_min: Any) -> Optional[int]:
    if estimate_min is None:
        return None
    if isinstance(estimate_min, bool) or not isinstance(estimate_min, int) or estimate_min < 0:
        raise ValidationError("Estimate must be a non-negative number of minutes.")
    return estimate_min


def clamp_snooze_days(days: Any) -> float:
    """Snooze length in days: default 1 when absent or not a finite number, clamped to [1, 30]."""
    try:
        value = float(days)
    except (TypeError, ValueError):
        return DEFAULT_SNOOZE_DAYS
    if isinstance(days, bool) or not math.isfinite(value):
        return DEFAULT_SNOOZE_DAYS
    return min(MAX_SNOOZE_DAYS, max(1, value))


class TaskService:
    """Create/read/update/delete/complete/snooze operations on tasks."""

    def __init__(self, db: Session, views: ViewCache):
        self.tasks = TaskRepository(db)
        self.health = HealthRepository(db)
        self.moods = MoodRepository(db)
        self.views = views

    def _invalidate(self) -> None:
        self.views.invalidate(TASK_VIEWS)

    def create(
        self,
        title: Any,
        description: Optional[str] = None,
        due_date: Optional[datetime] = None,
        estimate_min: Optional[int] = None,
        importance: Optional[int] = None,
    ) -> Task:
        """Create an open task. Importance defaults to 3."""
        task = create_task_base(
            title=clean_title(title),
            description=description,
            due_date=to_utc_naive(due_date) if due_date else None,
            estimate_min=check_estimate(estimate_min),
            importance=check_importance(importance) if importance is not None else None,
        )
        with storage_guard("create task"):
            created = self.tasks.create(task)
        self._invalidate()
        logger.info(f"Created task {created.id}")
        return created

    def get(self, task_id: str) -> Task:
        with storage_guard("load task"):
            task = self.tasks.get(task_id)
        if task is None:
            raise NotFound("Task", task_id)
        return task

    def update(
        self,
        task_id: str,
        title: Any,
        importance: Any,
        description: Optional[str] = None,
        due_date: Optional[datetime] = None,
        estimate_min: Optional[int] = None,
        is_done: Optional[bool] = None,
    ) -> Task:
        """Replace a task's editable fields.

        Title and importance must always be supplied. A missing due date or
        estimate clears it; a missing is_done keeps the current state.
        """
        title = clean_title(title)
        importance = check_importance(importance)
        estimate_min = check_estimate(estimate_min)

        current = self.get(task_id)
        replacement = current.model_copy(
            update={
                "title": title,
                "description": description,
                "due_date": to_utc_naive(due_date) if due_date else None,
                "estimate_min": estimate_min,
                "importance": importance,
                "is_done": current.is_done if is_done is None else is_done,
                "updated_at": utc_now(),
            }
        )
        with storage_guard("update task"):
            updated = self.tasks.update(replacement)
        if updated is None:
            raise NotFound("Task", task_id)
        self._invalidate()
        return updated

    def delete(self, task_id: str) -> None:
        """Delete a task permanently. Deleting twice raises NotFound."""
        with storage_guard("delete task"):
            deleted = self.tasks.delete(task_id)
        if not deleted:
            raise NotFound("Task", task_id)
        self._invalidate()
        logger.info(f"Deleted task {task_id}")

    def mark_done(self, task_id: str) -> Task:
        with storage_guard("complete task"):
            task = self.tasks.mark_done(task_id)
        if task is None:
            raise NotFound("Task", task_id)
        self._invalidate()
        return task

    def snooze(self, task_id: str, days: Any = None, now: Optional[datetime] = None) -> Task:
        """Push the due date forward; a task without one is due `days` from now."""
        days = clamp_snooze_days(days)
        current = self.get(task_id)
        base = current.due_date or now or utc_now()
        try:
            new_due = base + timedelta(days=days)
        except OverflowError as e:
            raise ValidationError("Snoozed due date is out of range.") from e
        with storage_guard("snooze task"):
            task = self.tasks.set_due_date(task_id, new_due)
        if task is None:
            raise NotFound("Task", task_id)
        self._invalidate()
        logger.info(f"Snoozed task {task_id} by {days:g} day(s)")
        return task

    def list(self, status: Optional[str] = None, sort: str = SORT_DEFAULT, now: Optional[datetime] = None) -> List[Task]:
        """List tasks, optionally filtered to open or done ones.

        The default order is open first, then due date ascending (no due date
        last), then importance descending. `sort="score"` returns open tasks in
        recommendation order.
        """
        if status not in (None, STATUS_OPEN, STATUS_DONE):
            raise ValidationError("status must be 'open' or 'done'")
        if sort not in (SORT_DEFAULT, SORT_SCORE):
            raise ValidationError("sort must be 'default' or 'score'")

        is_done = None if status is None else status == STATUS_DONE
        with storage_guard("list tasks"):
            tasks = self.tasks.get_all(is_done=is_done)
        if sort == SORT_SCORE:
            return [scored.task for scored in self.rank(tasks, now=now)]
        return list_order(tasks)

    def today_inputs(self, now: Optional[datetime] = None) -> tuple:
        """Today's health condition and the latest mood recorded today (either may be None)."""
        key = today_key(now)
        with storage_guard("load today's records"):
            health = self.health.get_for_day(key)
            mood = self.moods.latest_since(key)
        return (health.condition if health else None, mood.mood if mood else None)

    def rank(self, tasks: List[Task], now: Optional[datetime] = None) -> List[ScoredTask]:
        condition, mood = self.today_inputs(now)
        return rank_by_score(tasks, condition=condition, mood=mood, now=now)

    def top_by_score(self, limit: int = DASHBOARD_TOP_N, now: Optional[datetime] = None) -> List[ScoredTask]:
        """Highest-scoring open tasks for the dashboard."""
        with storage_guard("list open tasks"):
            open_tasks = self.tasks.get_open()
        return self.rank(open_tasks, now=now)[:limit]
