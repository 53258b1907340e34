from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, Sequence

from .core.types import DayInfo
from .core.time import sunday_weekday
from .attributes.registry import compute_attributes
from .reckoning.julian import offset_for_year, to_gregorian, to_julian
from .reckoning.octoechos import BRIGHT_WEEK_DAYS, governing_pascha, tone_for_date
from .slavonic.display import format_date_line


def day_info(
    d: date,
    *,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    julian = to_julian(d)
    pascha = governing_pascha(d)
    tone = tone_for_date(d)

    dbg = None
    if debug:
        thomas = pascha.shift(BRIGHT_WEEK_DAYS)
        dbg = {
            "offset": offset_for_year(d.year),
            "julian_pascha": pascha.isoformat(),
            "julian_thomas_sunday": thomas.isoformat(),
            "days_since_thomas": julian - thomas,
        }

    info = DayInfo(
        civil_date=d,
        julian=julian,
        weekday=sunday_weekday(d),
        tone=tone,
        pascha=to_gregorian(pascha),
        debug=dbg,
    )
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def date_line(d: date) -> str:
    """Church Slavonic date line for a Gregorian day."""
    return format_date_line(d, to_julian(d), tone_for_date(d))

def explain(d: date) -> Dict[str, Any]:
    """day_info(d, debug=True) as a plain dict; dates rendered as ISO strings."""
    info = day_info(d, debug=True)
    return {
        "civil_date": info.civil_date.isoformat(),
        "julian": info.julian.isoformat(),
        "weekday": info.weekday,
        "tone": info.tone,
        "pascha": info.pascha.isoformat(),
        "bright_week": info.bright_week,
        "debug": dict(info.debug or {}),
    }
