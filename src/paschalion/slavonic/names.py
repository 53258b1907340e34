"""Church Slavonic month and weekday names."""

from __future__ import annotations

from typing import Tuple

# Genitive case, read as "<day> of <month>"; index 0 = January
MONTH_NAMES: Tuple[str, ...] = (
    "і҆аннꙋа́рїа",
    "феврꙋа́рїа",
    "ма́рта",
    "а҆прі́ллїа",
    "ма́їа",
    "і҆ꙋ́нїа",
    "і҆ꙋ́лїа",
    "а҆́ѵгꙋста",
    "септе́мврїа",
    "ѻ҆ктѡ́врїа",
    "ное́мврїа",
    "деке́мврїа",
)

# Index 0 = Sunday
WEEKDAY_NAMES: Tuple[str, ...] = (
    "Недѣ́лѧ",  # Sunday
    "Понедѣ́льникъ",  # Monday
    "Вто́рникъ",  # Tuesday
    "Среда̀",  # Wednesday
    "Четверто́къ",  # Thursday
    "Пѧто́къ",  # Friday
    "Сꙋббѡ́та",  # Saturday
)

TONE_PREFIX = "Гла́съ"
NBSP = "\u00a0"


def month_name(month: int) -> str:
    """Month name for a 0-based month index; "" when out of range."""
    if not 0 <= month < len(MONTH_NAMES):
        return ""
    return MONTH_NAMES[month]


def day_of_week_name(weekday: int) -> str:
    """Weekday name for 0=Sunday..6=Saturday; "" when out of range."""
    if not 0 <= weekday < len(WEEKDAY_NAMES):
        return ""
    return WEEKDAY_NAMES[weekday]
