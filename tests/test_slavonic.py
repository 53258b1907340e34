# tests/test_slavonic.py

import pytest
from datetime import date

from paschalion import (
    JulianDate,
    day_of_week_name,
    day_to_numeral,
    format_date_line,
    month_name,
    tone_label,
    weekday_index,
)
from paschalion.slavonic.names import MONTH_NAMES, WEEKDAY_NAMES
from paschalion.slavonic.numerals import TITLO

T = "҃"  # titlo
GLAS = "Гла́съ"
NBSP = " "


@pytest.mark.parametrize(
    "n, expected",
    [
        (1, "а" + T),
        (2, "в" + T),
        (5, "є" + T),
        (6, "ѕ" + T),
        (9, "ѳ" + T),
        (10, "і" + T),
        (11, "а" + T + "і"),
        (15, "є" + T + "і"),
        (19, "ѳ" + T + "і"),
        (20, "к" + T),
        (21, "ка" + T),
        (22, "кв" + T),
        (29, "кѳ" + T),
        (30, "л" + T),
        (31, "ла" + T),
    ],
)
def test_day_to_numeral(n, expected):
    assert day_to_numeral(n) == expected

@pytest.mark.parametrize("n", [0, 32, -1, 100])
def test_day_to_numeral_out_of_range_is_empty(n):
    assert day_to_numeral(n) == ""

def test_numerals_carry_exactly_one_titlo():
    assert TITLO == T
    for n in range(1, 32):
        s = day_to_numeral(n)
        assert s.count(T) == 1, n
        assert len(s) == (2 if n <= 10 or n in (20, 30) else 3), n

def test_teen_titlo_sits_over_the_unit():
    for n in range(11, 20):
        s = day_to_numeral(n)
        assert s[1] == T
        assert s[2] == "і"

def test_twenties_titlo_is_trailing():
    for n in list(range(21, 30)) + [31]:
        assert day_to_numeral(n).endswith(T)

def test_numerals_are_distinct_and_stable():
    all_ = [day_to_numeral(n) for n in range(1, 32)]
    assert len(set(all_)) == 31
    assert all_ == [day_to_numeral(n) for n in range(1, 32)]

def test_month_names():
    assert len(MONTH_NAMES) == 12
    assert month_name(2) == "ма́рта"
    assert month_name(0) == MONTH_NAMES[0]
    assert month_name(11) == MONTH_NAMES[11]
    assert month_name(12) == ""
    assert month_name(-1) == ""

def test_day_of_week_names():
    assert len(WEEKDAY_NAMES) == 7
    assert day_of_week_name(0) == "Недѣ́лѧ"
    assert day_of_week_name(6) == WEEKDAY_NAMES[6]
    assert day_of_week_name(7) == ""
    assert day_of_week_name(-1) == ""

@pytest.mark.parametrize("tone", range(1, 9))
def test_tone_label(tone):
    label = tone_label(tone)
    assert label == GLAS + NBSP + day_to_numeral(tone)

@pytest.mark.parametrize("tone", [None, 0, 9, -1])
def test_tone_label_out_of_range(tone):
    assert tone_label(tone) == ""

def test_weekday_index():
    assert weekday_index(date(2024, 5, 5)) == 0
    assert weekday_index(date(2024, 5, 6)) == 1
    assert weekday_index(date(2024, 5, 11)) == 6

def test_format_date_line_with_tone():
    # Thomas Sunday 2024 = Julian April 29
    line = format_date_line(date(2024, 5, 12), JulianDate.from_ymd(2024, 4, 29), 1)
    assert line == f"{WEEKDAY_NAMES[0]}, {MONTH_NAMES[3]} кѳ{T}. {GLAS}{NBSP}а{T}"

def test_format_date_line_without_tone():
    line = format_date_line(date(2024, 5, 5), JulianDate.from_ymd(2024, 4, 22), None)
    assert line == f"{WEEKDAY_NAMES[0]}, {MONTH_NAMES[3]} кв{T}"

def test_format_date_line_uses_gregorian_weekday():
    # the carrier 2024-04-29 is a Monday; the day itself is a Sunday
    line = format_date_line(date(2024, 5, 12), JulianDate.from_ymd(2024, 4, 29), None)
    assert line.startswith(WEEKDAY_NAMES[0] + ",")
