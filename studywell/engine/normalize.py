"""Input normalization for the health and mood journals.

Raw input arrives as a number, a label (text or emoji) or something else.
Each value is first classified into exactly one InputKind, then mapped onto
the integer scale; anything that does not map is invalid (None).
"""

import math
from enum import Enum
from typing import Any, Dict, Optional

from studywell.models.constants import (
    CONDITION_BAD,
    CONDITION_GOOD,
    CONDITION_NORMAL,
    MAX_MOOD,
    MIN_MOOD,
)


class InputKind(str, Enum):
    """Closed set of raw input shapes."""
    NUMBER = "number"
    LABEL = "label"
    OTHER = "other"


# Case-sensitive label tables.
CONDITION_LABELS: Dict[str, int] = {
    "良い": CONDITION_GOOD,
    "普通": CONDITION_NORMAL,
    "悪い": CONDITION_BAD,
    "good": CONDITION_GOOD,
    "normal": CONDITION_NORMAL,
    "bad": CONDITION_BAD,
}

MOOD_LABELS: Dict[str, int] = {
    "😄": 5,
    "🙂": 4,
    "😐": 3,
    "😕": 2,
    "😞": 1,
    "very_good": 5,
    "good": 4,
    "neutral": 3,
    "bad": 2,
    "very_bad": 1,
}

CONDITION_DISPLAY = {CONDITION_GOOD: "良い", CONDITION_NORMAL: "普通", CONDITION_BAD: "悪い"}
MOOD_EMOJI = {5: "😄", 4: "🙂", 3: "😐", 2: "😕", 1: "😞"}
NO_VALUE_LABEL = "—"


def classify_input(value: Any) -> InputKind:
    # bool is a subclass of int but is never a score
    if isinstance(value, bool):
        return InputKind.OTHER
    if isinstance(value, (int, float)):
        return InputKind.NUMBER
    if isinstance(value, str):
        return InputKind.LABEL
    return InputKind.OTHER


def _scale_value(value: Any, labels: Dict[str, int], low: int, high: int) -> Optional[int]:
    kind = classify_input(value)
    if kind is InputKind.NUMBER:
        if not math.isfinite(value) or value != int(value):
            return None
        number = int(value)
        return number if low <= number <= high else None
    if kind is InputKind.LABEL:
        return labels.get(value)
    return None


def normalize_condition(value: Any) -> Optional[int]:
    """Map a condition input (1-3, 良い/普通/悪い, good/normal/bad) to 1..3, or None."""
    return _scale_value(value, CONDITION_LABELS, CONDITION_BAD, CONDITION_GOOD)


def normalize_mood(value: Any) -> Optional[int]:
    """Map a mood input (1-5, emoji, very_bad..very_good) to 1..5, or None."""
    return _scale_value(value, MOOD_LABELS, MIN_MOOD, MAX_MOOD)


def condition_label(condition: Optional[int]) -> str:
    return CONDITION_DISPLAY.get(condition, NO_VALUE_LABEL)


def mood_emoji(mood: Optional[int]) -> str:
    return MOOD_EMOJI.get(mood, NO_VALUE_LABEL)
