"""Priority scoring for StudyWell.

A task's score is its importance scaled by three coefficients:
today's health condition, the latest mood and how close the due date is.
All functions are total: unknown or missing input maps to a neutral value.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from studywell.engine.civil_time import to_utc_naive, utc_now
from studywell.models.constants import (
    DUE_SOON_COEFFICIENT,
    DUE_SOON_HOURS,
    DUE_UPCOMING_COEFFICIENT,
    DUE_UPCOMING_HOURS,
    HEALTH_COEFFICIENT_MISSING,
    HEALTH_COEFFICIENTS,
    MAX_MOOD,
    MIN_MOOD,
)


class DueStatus(str, Enum):
    """Display classification of a due date."""
    NONE = "none"
    OVERDUE = "overdue"
    DUE_SOON = "due_soon"
    UPCOMING = "upcoming"
    LATER = "later"


def health_coefficient(condition: Optional[int]) -> float:
    """Coefficient for today's condition (3=good, 2=normal, 1=bad)."""
    return HEALTH_COEFFICIENTS.get(condition, HEALTH_COEFFICIENT_MISSING)


def mood_coefficient(mood: Optional[int]) -> float:
    """Coefficient for a 1..5 mood: 1 -> 0.9, 3 -> 1.1, 5 -> 1.3."""
    if not mood:
        return 1.0
    m = max(MIN_MOOD, min(MAX_MOOD, mood))
    return 0.8 + 0.1 * m


def hours_until(due_date: datetime, now: Optional[datetime] = None) -> float:
    now = to_utc_naive(now) if now else utc_now()
    return (to_utc_naive(due_date) - now).total_seconds() / 3600


def due_coefficient(due_date: Optional[datetime], now: Optional[datetime] = None) -> float:
    """Urgency boost for a due date.

    Overdue tasks land in the <=24h bucket together with tasks due soon.
    """
    if due_date is None:
        return 1.0
    diff_hours = hours_until(due_date, now)
    if diff_hours <= DUE_SOON_HOURS:
        return DUE_SOON_COEFFICIENT
    if diff_hours <= DUE_UPCOMING_HOURS:
        return DUE_UPCOMING_COEFFICIENT
    return 1.0


def task_score(importance: float, health_coef: float, mood_coef: float, due_coef: float) -> float:
    return importance * health_coef * mood_coef * due_coef


def due_status(due_date: Optional[datetime], now: Optional[datetime] = None) -> DueStatus:
    """Classify a due date for display; unlike the score, overdue is its own tier."""
    if due_date is None:
        return DueStatus.NONE
    diff_hours = hours_until(due_date, now)
    if diff_hours < 0:
        return DueStatus.OVERDUE
    if diff_hours <= DUE_SOON_HOURS:
        return DueStatus.DUE_SOON
    if diff_hours <= DUE_UPCOMING_HOURS:
        return DueStatus.UPCOMING
    return DueStatus.LATER
