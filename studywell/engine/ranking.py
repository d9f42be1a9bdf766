"""Ranking logic for StudyWell.

Two orderings exist:
- the list order (open first, then by deadline, then by importance)
- the recommendation order (score, highest first)
Both are deterministic: Python's sort is stable, so equal keys keep the
incoming order.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

from studywell.engine.civil_time import utc_now
from studywell.engine.scoring import (
    DueStatus,
    due_coefficient,
    due_status,
    health_coefficient,
    mood_coefficient,
    task_score,
)
from studywell.models.task import Task


class ScoredTask(BaseModel):
    """A task with the coefficients that produced its score."""

    task: Task
    health_coef: float
    mood_coef: float
    due_coef: float
    score: float
    due_status: DueStatus

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


def score_task(
    task: Task,
    condition: Optional[int] = None,
    mood: Optional[int] = None,
    now: Optional[datetime] = None,
) -> ScoredTask:
    now = now or utc_now()
    health_coef = health_coefficient(condition)
    mood_coef = mood_coefficient(mood)
    due_coef = due_coefficient(task.due_date, now)
    return ScoredTask(
        task=task,
        health_coef=health_coef,
        mood_coef=mood_coef,
        due_coef=due_coef,
        score=task_score(task.importance, health_coef, mood_coef, due_coef),
        due_status=due_status(task.due_date, now),
    )


def rank_by_score(
    tasks: List[Task],
    condition: Optional[int] = None,
    mood: Optional[int] = None,
    now: Optional[datetime] = None,
) -> List[ScoredTask]:
    """Rank open tasks by score, highest first.

    Completed tasks are dropped. Ties keep their incoming order.

    Args:
        tasks: Tasks to rank
        condition: Today's health condition (1-3) or None
        mood: Latest mood (1-5) or None
        now: Reference time for due-date urgency

    Returns:
        Scored open tasks, highest score first
    """
    now = now or utc_now()
    scored = [score_task(task, condition, mood, now) for task in tasks if not task.is_done]
    return sorted(scored, key=lambda s: s.score, reverse=True)


def _due_sort_key(task: Task) -> tuple:
    """Tasks with a due date come first, earliest first; no due date sorts as infinitely far."""
    if task.due_date:
        return (0, task.due_date.timestamp())
    return (1, float('inf'))


def list_order(tasks: List[Task]) -> List[Task]:
    """Default listing order: open first, then due date ascending, then importance descending."""
    return sorted(tasks, key=lambda t: (t.is_done, _due_sort_key(t), -t.importance))
