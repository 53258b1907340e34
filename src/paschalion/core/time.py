from __future__ import annotations
from datetime import date

from .errors import DateRangeError


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise DateRangeError(f"JDN {jdn} ({year:04d}-{month:02d}-{day:02d}) is outside the supported date range") from exc

def add_days(d: date, days: int) -> date:
    """Shift a Gregorian date by whole days, renormalizing month and year."""
    return from_jdn(to_jdn(d) + days)

def days_between(a: date, b: date) -> int:
    """Whole days from b to a (negative when a precedes b)."""
    return to_jdn(a) - to_jdn(b)

def sunday_weekday(d: date) -> int:
    """Weekday with 0=Sunday..6=Saturday."""
    # JDN 0 mod 7 is a Monday
    return int((to_jdn(d) + 1) % 7)
