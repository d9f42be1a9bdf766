"""History aggregation for StudyWell.

Merges daily health records and timestamped mood entries into one row per
civil day, and summarizes a trailing window of those rows.
"""

from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from studywell.engine.civil_time import instant_to_civil_date
from studywell.engine.normalize import condition_label, mood_emoji
from studywell.models.constants import (
    CONDITION_BAD,
    CONDITION_GOOD,
    CONDITION_NORMAL,
    HISTORY_DAYS,
    SUMMARY_WINDOW_DAYS,
)
from studywell.models.health import DailyHealthRecord, MoodLogEntry
from studywell.models.history import ConditionCounts, HistoryRow, HistorySummary


def _mean(values: List[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def _has_text(note: Optional[str]) -> bool:
    return bool(note and note.strip())


def merge_history(
    health_records: Iterable[DailyHealthRecord],
    mood_entries: Iterable[MoodLogEntry],
    limit_days: int = HISTORY_DAYS,
) -> List[HistoryRow]:
    """Merge both journals into per-day rows, newest day first.

    Days are civil (UTC+9) dates. Mood entries keep the order they were given
    in. At most `limit_days` rows are returned.
    """
    health_by_day: Dict[date, DailyHealthRecord] = {}
    moods_by_day: Dict[date, List[MoodLogEntry]] = {}

    for record in health_records:
        health_by_day[instant_to_civil_date(record.date)] = record
    for entry in mood_entries:
        moods_by_day.setdefault(instant_to_civil_date(entry.at), []).append(entry)

    days = sorted(set(health_by_day) | set(moods_by_day), reverse=True)[:limit_days]

    rows: List[HistoryRow] = []
    for day in days:
        health = health_by_day.get(day)
        moods = moods_by_day.get(day, [])
        rows.append(
            HistoryRow(
                day=day,
                health=health,
                condition_label=condition_label(health.condition if health else None),
                moods=moods,
                mood_emojis=[mood_emoji(m.mood) for m in moods],
                average_mood=_mean([m.mood for m in moods]),
                has_any_note=(_has_text(health.note) if health else False)
                or any(_has_text(m.note) for m in moods),
            )
        )
    return rows


def summarize_window(
    rows: Iterable[HistoryRow],
    today: date,
    window_days: int = SUMMARY_WINDOW_DAYS,
) -> HistorySummary:
    """Summarize the civil days `today - (window_days - 1)` through `today`.

    The average is the mean of daily averages, skipping days without mood data.
    """
    start = today - timedelta(days=window_days - 1)
    in_window = [row for row in rows if start <= row.day <= today]

    counts = ConditionCounts()
    for row in in_window:
        if row.health is None:
            continue
        if row.health.condition == CONDITION_GOOD:
            counts.good += 1
        elif row.health.condition == CONDITION_NORMAL:
            counts.normal += 1
        elif row.health.condition == CONDITION_BAD:
            counts.bad += 1

    return HistorySummary(
        window_days=window_days,
        average_mood=_mean([row.average_mood for row in in_window if row.average_mood is not None]),
        condition_counts=counts,
    )
