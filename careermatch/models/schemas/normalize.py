"""Lenient coercion helpers shared by the profile and posting schemas.

Documents come from forms that store loosely-typed values. Every helper here
turns a bad value into the most conservative one instead of failing
validation.
"""

import math
from typing import Any


def to_float(value: Any, default: float = 0.0) -> float:
    if isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(result) or math.isinf(result):
        return default
    return result


def to_int(value: Any, default: int = 0) -> int:
    result = to_float(value, float(default))
    return int(result)


def to_text(value: Any) -> str | None:
    """Non-empty stripped string, or None."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def to_str_list(value: Any) -> list[str]:
    """Keep the string items of a list/tuple/set, dropping blanks and repeats."""
    if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
        return []
    items: list[str] = []
    for item in value:
        text = to_text(item)
        if text is not None and text not in items:
            items.append(text)
    return items


def to_grade_map(value: Any) -> dict[str, str]:
    """Subject -> letter grade map. Non-string grades become "" (rank 0)."""
    if not isinstance(value, dict):
        return {}
    grades: dict[str, str] = {}
    for subject, grade in value.items():
        name = to_text(subject)
        if name is None:
            continue
        grades[name] = (to_text(grade) or "").upper()
    return grades


def to_label(value: Any) -> str | None:
    """Enum-like requirement value. Numbers are kept as text so they still
    declare the criterion; they rank 0 like any unknown label."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{value:g}"
    return to_text(value)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def to_score(value: Any) -> int | None:
    """Stored 0-100 match score, possibly fractional. Unreadable -> None."""
    if value is None or isinstance(value, bool):
        return None
    result = to_float(value, math.nan)
    if math.isnan(result):
        return None
    return max(0, min(100, round_half_up(result)))


# A threshold that is present but cannot be read can never be met.
UNREADABLE = math.inf


def positive_or_none(value: Any) -> float | None:
    """Numeric threshold.

    Absent, blank, zero and negative values mean "no minimum". Anything else
    that does not parse as a finite number becomes ``UNREADABLE``.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    result = to_float(value, UNREADABLE)
    return result if result > 0 else None
