"""Tests for merging the health and mood journals into per-day history."""

import pytest
from datetime import date, datetime

from studywell.engine.civil_time import civil_date_to_instant
from studywell.engine.history import merge_history, summarize_window
from studywell.models.health import DailyHealthRecord, MoodLogEntry


def _health(day: str, condition: int, note=None) -> DailyHealthRecord:
    key = civil_date_to_instant(day)
    return DailyHealthRecord(id=f"h-{day}", date=key, condition=condition, note=note, created_at=key, updated_at=key)


def _mood(entry_id: str, at: datetime, mood: int, note=None) -> MoodLogEntry:
    return MoodLogEntry(id=entry_id, at=at, mood=mood, note=note)


class TestMergeHistory:
    """merge_history() buckets both journals by civil (UTC+9) day."""

    def test_rows_newest_first(self):
        rows = merge_history(
            [_health("2025-06-01", 3), _health("2025-06-03", 1)],
            [_mood("m1", datetime(2025, 6, 1, 3, 0), 4)],
        )
        assert [row.day for row in rows] == [date(2025, 6, 3), date(2025, 6, 1)]

    def test_mood_bucketed_by_civil_day(self):
        # 16:00 UTC on May 31st is 01:00 JST on June 1st
        rows = merge_history([], [_mood("m1", datetime(2025, 5, 31, 16, 0), 5)])
        assert rows[0].day == date(2025, 6, 1)
        assert rows[0].health is None
        assert rows[0].condition_label == "—"

    def test_average_and_emojis(self):
        rows = merge_history(
            [_health("2025-06-01", 2)],
            [
                _mood("m2", datetime(2025, 6, 1, 5, 0), 5),
                _mood("m1", datetime(2025, 6, 1, 1, 0), 2),
            ],
        )
        row = rows[0]
        assert row.condition_label == "普通"
        assert row.mood_emojis == ["😄", "😕"]
        assert row.average_mood == pytest.approx(3.5)

    def test_average_is_none_without_moods(self):
        rows = merge_history([_health("2025-06-01", 3)], [])
        assert rows[0].average_mood is None
        assert rows[0].moods == []

    def test_has_any_note_ignores_whitespace(self):
        rows = merge_history(
            [_health("2025-06-02", 3, note="   "), _health("2025-06-01", 3)],
            [_mood("m1", datetime(2025, 5, 31, 20, 0), 3, note="slept well")],
        )
        assert rows[0].has_any_note is False
        assert rows[1].has_any_note is True

    def test_limit_days(self):
        records = [_health(f"2025-06-{d:02d}", 3) for d in range(1, 11)]
        rows = merge_history(records, [], limit_days=3)
        assert [row.day.day for row in rows] == [10, 9, 8]

    def test_empty(self):
        assert merge_history([], []) == []


class TestSummarizeWindow:
    """summarize_window() covers today and the six days before it."""

    def test_window_boundaries(self):
        rows = merge_history(
            [
                _health("2025-06-10", 3),
                _health("2025-06-04", 1),  # first day in window
                _health("2025-06-03", 2),  # outside
            ],
            [],
        )
        summary = summarize_window(rows, today=date(2025, 6, 10))
        assert summary.window_days == 7
        assert summary.condition_counts.good == 1
        assert summary.condition_counts.bad == 1
        assert summary.condition_counts.normal == 0

    def test_average_of_daily_averages(self):
        rows = merge_history(
            [],
            [
                _mood("a", datetime(2025, 6, 9, 1, 0), 5),
                _mood("b", datetime(2025, 6, 9, 2, 0), 3),
                _mood("c", datetime(2025, 6, 10, 1, 0), 1),
            ],
        )
        summary = summarize_window(rows, today=date(2025, 6, 10))
        # (4.0 + 1.0) / 2, not (5 + 3 + 1) / 3
        assert summary.average_mood == pytest.approx(2.5)

    def test_no_mood_data(self):
        rows = merge_history([_health("2025-06-10", 2)], [])
        summary = summarize_window(rows, today=date(2025, 6, 10))
        assert summary.average_mood is None
        assert summary.condition_counts.normal == 1
