"""
paschalion.reckoning.paschalion
-------------------------------
Date of Pascha by the Alexandrian (Julian) Computus.

All arithmetic is in Julian terms; the (month, day) result is read on the
Gregorian carrier and moved forward by the year's offset to obtain the
Gregorian date.
"""

from __future__ import annotations

from datetime import date
from typing import Tuple

from ..core.errors import DateRangeError
from ..core.time import add_days
from ..core.types import JulianDate
from .julian import offset_for_year, to_julian

# Julian bounds of Pascha, inclusive
EARLIEST = (3, 22)
LATEST = (4, 25)


def computus(year: int) -> Tuple[int, int]:
    """Julian (month, day) of Pascha; month is 3 (March) or 4 (April)."""
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30          # epact-like lunar term
    e = (2 * a + 4 * b - d + 34) % 7  # days to the following Sunday
    month = (d + e + 114) // 31
    day = (d + e + 114) % 31 + 1
    return month, day


def pascha_for_year(year: int) -> date:
    """Gregorian date of Pascha in the given year."""
    month, day = computus(year)
    try:
        carrier = date(year, month, day)
    except ValueError as exc:
        raise DateRangeError(f"Year {year} is outside the supported date range") from exc
    return add_days(carrier, offset_for_year(year))


def julian_pascha(year: int) -> JulianDate:
    """Pascha as a Julian label, comparable with to_julian() results."""
    return to_julian(pascha_for_year(year))
