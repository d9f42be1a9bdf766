"""Scoring, normalization and aggregation engine for StudyWell."""

from studywell.engine.civil_time import civil_date_to_instant, today_civil_date_string, today_key
from studywell.engine.scoring import health_coefficient, mood_coefficient, due_coefficient, task_score, due_status
from studywell.engine.ranking import rank_by_score, list_order, ScoredTask
from studywell.engine.normalize import normalize_condition, normalize_mood
from studywell.engine.history import merge_history, summarize_window

__all__ = [
    "civil_date_to_instant",
    "today_civil_date_string",
    "today_key",
    "health_coefficient",
    "mood_coefficient",
    "due_coefficient",
    "task_score",
    "due_status",
    "rank_by_score",
    "list_order",
    "ScoredTask",
    "normalize_condition",
    "normalize_mood",
    "merge_history",
    "summarize_window",
]
