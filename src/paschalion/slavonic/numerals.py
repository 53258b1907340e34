"""
paschalion.slavonic.numerals
----------------------------
Cyrillic (Church Slavonic) numerals for day-of-month and tone numbers.

A letter read as a number carries the titlo (U+0483). Composition for 1..31:

  1..9    unit letter + titlo                  а҃
  10      і + titlo                            і҃
  11..19  unit letter + titlo, then bare і     а҃і
  20, 30  tens letter + titlo                  к҃
  21..31  tens + unit, one titlo at the end    ка҃
"""

from __future__ import annotations

from typing import Optional, Tuple

from .names import NBSP, TONE_PREFIX

TITLO = "҃"

_UNIT_LETTERS = "авгдєѕзиѳ"  # 1..9
_TENS_LETTERS = "іклмнѯѻпч"  # 10..90

UNITS: Tuple[str, ...] = ("",) + tuple(ch + TITLO for ch in _UNIT_LETTERS)
TENS: Tuple[str, ...] = ("",) + tuple(ch + TITLO for ch in _TENS_LETTERS)


def day_to_numeral(day: int) -> str:
    """Numeral for a day of month 1..31; "" for anything else."""
    if day < 1 or day > 31:
        return ""
    if day < 10:
        return UNITS[day]
    if day == 10:
        return TENS[1]
    if day < 20:
        return UNITS[day - 10] + _TENS_LETTERS[0]

    tens, units = divmod(day, 10)
    if units == 0:
        return TENS[tens]
    return _TENS_LETTERS[tens - 1] + _UNIT_LETTERS[units - 1] + TITLO


def tone_label(tone: Optional[int]) -> str:
    """'Гла́съ' + NBSP + numeral for tones 1..8; "" otherwise (including None)."""
    if tone is None or tone < 1 or tone > 8:
        return ""
    return f"{TONE_PREFIX}{NBSP}{UNITS[tone]}"
