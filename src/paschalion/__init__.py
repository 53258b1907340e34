"""paschalion public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register standard attributes on import
from .attributes import standard as _standard  # noqa: F401

from .api import (
    day_info,
    date_line,
    explain,
)
from .attributes.registry import list_attributes, register_attribute
from .core.errors import DateRangeError, PaschalionError
from .core.types import DayInfo, JulianDate
from .reckoning.julian import offset_for_year, to_gregorian, to_julian
from .reckoning.paschalion import computus, julian_pascha, pascha_for_year
from .reckoning.octoechos import governing_pascha, is_bright_week, thomas_sunday, tone_for_date
from .slavonic.display import format_date_line, weekday_index
from .slavonic.names import day_of_week_name, month_name
from .slavonic.numerals import day_to_numeral, tone_label

__all__ = [
    "offset_for_year",
    "to_julian",
    "to_gregorian",
    "computus",
    "pascha_for_year",
    "julian_pascha",
    "thomas_sunday",
    "governing_pascha",
    "tone_for_date",
    "is_bright_week",
    "day_to_numeral",
    "month_name",
    "day_of_week_name",
    "tone_label",
    "weekday_index",
    "format_date_line",
    "day_info",
    "date_line",
    "explain",
    "list_attributes",
    "register_attribute",
    "JulianDate",
    "DayInfo",
    "PaschalionError",
    "DateRangeError",
]
