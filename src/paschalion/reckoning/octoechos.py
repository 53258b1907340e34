"""
paschalion.reckoning.octoechos
------------------------------
Weekly tone of the Octoechos.

Tone 1 starts on Thomas Sunday (Pascha + 7 days) and the eight tones then
cycle week by week until the next Pascha. Bright Week (Pascha through the
following Saturday) has no tone.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.types import JulianDate
from .julian import to_gregorian, to_julian
from .paschalion import julian_pascha

BRIGHT_WEEK_DAYS = 7
TONES = 8


def governing_pascha(today: date) -> JulianDate:
    """The Pascha whose cycle contains the given day, as a Julian label."""
    julian_today = to_julian(today)
    pascha = julian_pascha(julian_today.year)
    if julian_today < pascha:
        # January up to this year's Pascha still belongs to last year's cycle
        pascha = julian_pascha(julian_today.year - 1)
    return pascha


def thomas_sunday(year: int) -> date:
    """Gregorian date of Thomas Sunday in the given year."""
    return to_gregorian(julian_pascha(year).shift(BRIGHT_WEEK_DAYS))


def tone_for_date(today: date) -> Optional[int]:
    """Tone 1..8 for a Gregorian day, or None during Bright Week."""
    julian_today = to_julian(today)
    pascha = governing_pascha(today)
    thomas = pascha.shift(BRIGHT_WEEK_DAYS)

    if pascha <= julian_today < thomas:
        return None

    days_since_thomas = julian_today - thomas
    weeks_since_thomas = days_since_thomas // 7 + 1
    return (weeks_since_thomas - 1) % TONES + 1


def is_bright_week(today: date) -> bool:
    return tone_for_date(today) is None
