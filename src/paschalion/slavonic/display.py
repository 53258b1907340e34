from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.time import sunday_weekday
from ..core.types import JulianDate
from .names import day_of_week_name, month_name
from .numerals import day_to_numeral, tone_label


def weekday_index(d: date) -> int:
    """0=Sunday..6=Saturday for a Gregorian date."""
    return sunday_weekday(d)


def format_date_line(today: date, julian: JulianDate, tone: Optional[int]) -> str:
    """
    "<weekday>, <month> <day>" in Church Slavonic, plus ". <tone>" when a tone
    is assigned.

    The weekday comes from the Gregorian day; month and day are the Julian
    labels.
    """
    line = f"{day_of_week_name(weekday_index(today))}, {month_name(julian.month - 1)} {day_to_numeral(julian.day)}"
    if tone is not None:
        line += f". {tone_label(tone)}"
    return line
