"""Civil (UTC+9) date handling for StudyWell.

Daily records are keyed by the instant of local midnight in a fixed UTC+9
offset, so the key never depends on the server host timezone. Both the write
path (health upsert) and the read path (history bucketing) go through this
module so their day boundaries agree.

Instants are naive UTC datetimes, matching what the database stores.
"""

import re
from datetime import date, datetime, timezone
from typing import Optional

from studywell.errors import InvalidDateFormat
from studywell.models.constants import CIVIL_UTC_OFFSET

CIVIL_TZ = timezone(CIVIL_UTC_OFFSET)

_CIVIL_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def utc_now() -> datetime:
    """Current instant as a naive UTC datetime."""
    return datetime.utcnow()


def to_utc_naive(value: datetime) -> datetime:
    """Normalize a datetime to naive UTC.

    Aware values are converted; naive values are assumed to already be UTC.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_civil_date(day: str) -> date:
    """Parse a strict `YYYY-MM-DD` string into a date.

    Raises:
        InvalidDateFormat: If the string does not match the 4-2-2 digit
            pattern or names a day that does not exist (e.g. 2025-02-30).
    """
    match = _CIVIL_DATE_RE.fullmatch(day) if isinstance(day, str) else None
    if not match:
        raise InvalidDateFormat("invalid dayJst format")
    year, month, dom = (int(part) for part in match.groups())
    try:
        return date(year, month, dom)
    except ValueError as e:
        raise InvalidDateFormat("invalid dayJst format") from e


def civil_date_to_instant(day: str) -> datetime:
    """Return the instant of 00:00 UTC+9 on the given civil day.

    Example: "2025-10-09" -> datetime(2025, 10, 8, 15, 0)
    """
    parsed = parse_civil_date(day)
    try:
        return datetime(parsed.year, parsed.month, parsed.day) - CIVIL_UTC_OFFSET
    except OverflowError as e:
        raise InvalidDateFormat("invalid dayJst format") from e


def instant_to_civil_date(instant: datetime) -> date:
    """Civil day an instant falls on (shift by the offset, truncate)."""
    return (to_utc_naive(instant) + CIVIL_UTC_OFFSET).date()


def today_civil_date(now: Optional[datetime] = None) -> date:
    return instant_to_civil_date(now or utc_now())


def today_civil_date_string(now: Optional[datetime] = None) -> str:
    """Today's date in UTC+9 as `YYYY-MM-DD`."""
    return today_civil_date(now).isoformat()


def today_key(now: Optional[datetime] = None) -> datetime:
    """Storage key for today's daily record."""
    return civil_date_to_instant(today_civil_date_string(now))


def civil_day_start(day: date) -> datetime:
    """Instant of 00:00 UTC+9 on a date object."""
    return civil_date_to_instant(day.isoformat())
