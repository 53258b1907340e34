"""
paschalion.reckoning.julian
---------------------------
Gregorian <-> Julian day labels.

The offset is a function of the Gregorian year only:

    offset(Y) = floor(Y/100) - floor(Y/400) - 2

It steps by one day on January 1 of every non-leap century year
(1900, 2100, 2200, ...), not on the Julian leap day.
"""

from __future__ import annotations

from datetime import date

from ..core.time import add_days
from ..core.types import JulianDate


def offset_for_year(year: int) -> int:
    """Days by which the Julian labels lag the Gregorian ones in Gregorian year Y."""
    century = year // 100
    leap_centuries = year // 400
    return century - leap_centuries - 2


def to_julian(d: date) -> JulianDate:
    """Gregorian date -> Julian label (offset of the Gregorian year, even across New Year)."""
    return JulianDate(add_days(d, -offset_for_year(d.year)))


def to_gregorian(j: JulianDate) -> date:
    """
    Julian label -> Gregorian date.

    The offset to add back is that of the Gregorian year the result lands in,
    which is the Julian year or the one after it (late December labels).
    On the one label duplicated by a century step (e.g. Julian 1899-12-19,
    reached from both 1899-12-31 and 1900-01-01) the day using the Julian
    year's offset wins (1899-12-31 here).
    """
    for year in (j.year, j.year + 1):
        g = add_days(j.carrier, offset_for_year(year))
        if g.year == year:
            return g
    # Negative offsets (before 200) move the result into the previous year.
    return add_days(j.carrier, offset_for_year(j.year - 1))
