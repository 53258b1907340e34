from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from .time import add_days, days_between


@dataclass(frozen=True, order=True)
class JulianDate:
    """
    A day labelled in Julian reckoning.

    The labels live on a proleptic Gregorian ``date`` (the carrier), so the
    host's day arithmetic applies unchanged. The carrier's own weekday means
    nothing; use the Gregorian day the label came from.

    Kept as its own type so Julian labels are never compared with Gregorian
    ``date`` objects by accident.
    """
    carrier: date

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> "JulianDate":
        return cls(date(year, month, day))

    @property
    def year(self) -> int:
        return self.carrier.year

    @property
    def month(self) -> int:
        return self.carrier.month

    @property
    def day(self) -> int:
        return self.carrier.day

    def shift(self, days: int) -> "JulianDate":
        return JulianDate(add_days(self.carrier, days))

    def __sub__(self, other: "JulianDate") -> int:
        if not isinstance(other, JulianDate):
            return NotImplemented
        return days_between(self.carrier, other.carrier)

    def isoformat(self) -> str:
        return self.carrier.isoformat()

    def __str__(self) -> str:
        return f"{self.isoformat()} (Julian)"


@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    julian: JulianDate
    weekday: int  # 0=Sunday
    tone: Optional[int]
    pascha: date  # Gregorian date of the Pascha governing this day's cycle
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None

    @property
    def bright_week(self) -> bool:
        return self.tone is None
