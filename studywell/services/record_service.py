"""Health/mood journal ingestion and the history view."""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from studywell.database.record_repository import HealthRepository, MoodRepository
from studywell.engine.civil_time import civil_date_to_instant, civil_day_start, today_civil_date, today_key
from studywell.engine.history import merge_history, summarize_window
from studywell.engine.normalize import normalize_condition, normalize_mood
from studywell.errors import ValidationError
from studywell.models.constants import HISTORY_DAYS, MOOD_HISTORY_LIMIT, SUMMARY_WINDOW_DAYS
from studywell.models.health import DailyHealthRecord, MoodLogEntry
from studywell.services.storage import storage_guard
from studywell.services.view_cache import DASHBOARD_VIEW, ViewCache

logger = logging.getLogger(__name__)


def _clean_note(note: Optional[str]) -> Optional[str]:
    return note if note else None


class RecordService:
    """Submits daily health records and mood entries, and builds the history view."""

    def __init__(self, db: Session, views: ViewCache):
        self.health = HealthRepository(db)
        self.moods = MoodRepository(db)
        self.views = views

    def submit_health(self, condition: Any, note: Optional[str] = None, day: Optional[str] = None) -> DailyHealthRecord:
        """Create or overwrite the health record of a civil day (today by default).

        Raises:
            ValidationError: Unrecognized condition or malformed day string
        """
        condition_value = normalize_condition(condition)
        if condition_value is None:
            raise ValidationError("invalid condition")
        day_key = civil_date_to_instant(day) if day else today_key()

        with storage_guard("save health record"):
            record = self.health.upsert(day_key, condition_value, _clean_note(note))
        # Today's condition feeds the dashboard scores.
        self.views.invalidate([DASHBOARD_VIEW])
        return record

    def submit_mood(self, mood: Any, note: Optional[str] = None, now: Optional[datetime] = None) -> MoodLogEntry:
        """Append a mood entry recorded now.

        Raises:
            ValidationError: Unrecognized mood
        """
        mood_value = normalize_mood(mood)
        if mood_value is None:
            raise ValidationError("invalid mood")

        with storage_guard("save mood entry"):
            entry = self.moods.create(mood_value, _clean_note(note), at=now)
        self.views.invalidate([DASHBOARD_VIEW])
        return entry

    def history(self, limit_days: int = HISTORY_DAYS, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Per-day merged history plus the trailing-week summary."""
        today = today_civil_date(now)
        # The summary window is fixed, so read at least that far back even for short views.
        fetch_days = max(limit_days, SUMMARY_WINDOW_DAYS)
        since_key = civil_day_start(today - timedelta(days=fetch_days))
        with storage_guard("load history"):
            health_records = self.health.list_since(since_key)
            mood_entries = self.moods.list_recent(MOOD_HISTORY_LIMIT)

        merged = merge_history(health_records, mood_entries, limit_days=fetch_days)
        return {
            "today": today.isoformat(),
            "rows": merged[:limit_days],
            "summary": summarize_window(merged, today, window_days=SUMMARY_WINDOW_DAYS),
        }
