"""Data models for StudyWell."""

from studywell.models.task import Task
from studywell.models.health import DailyHealthRecord, MoodLogEntry
from studywell.models.history import HistoryRow, HistorySummary, ConditionCounts
from studywell.models.settings import DisplaySettings, Theme

__all__ = [
    "Task",
    "DailyHealthRecord",
    "MoodLogEntry",
    "HistoryRow",
    "HistorySummary",
    "ConditionCounts",
    "DisplaySettings",
    "Theme",
]
