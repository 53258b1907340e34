from __future__ import annotations
from typing import Any, Dict

from ..reckoning.julian import to_julian
from ..reckoning.octoechos import BRIGHT_WEEK_DAYS
from ..slavonic.display import format_date_line
from ..slavonic.names import day_of_week_name, month_name
from ..slavonic.numerals import day_to_numeral, tone_label
from .registry import register_attribute

def weekday(info) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat
    return {
        "weekday": info.weekday,
        "weekday_name": day_of_week_name(info.weekday),
    }

def paschal(info) -> Dict[str, Any]:
    # counted on Julian labels, like the tone
    since = info.julian - to_julian(info.pascha)
    week = None
    if since >= BRIGHT_WEEK_DAYS:
        week = (since - BRIGHT_WEEK_DAYS) // 7 + 1
    return {
        "days_since_pascha": since,
        "bright_week": info.tone is None,
        "week_after_thomas": week,
    }

def slavonic(info) -> Dict[str, Any]:
    return {
        "julian_day": day_to_numeral(info.julian.day),
        "julian_month": month_name(info.julian.month - 1),
        "tone_label": tone_label(info.tone),
        "date_line": format_date_line(info.civil_date, info.julian, info.tone),
    }

register_attribute("weekday", weekday)
register_attribute("paschal", paschal)
register_attribute("slavonic", slavonic)
