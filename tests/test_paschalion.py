# tests/test_paschalion.py

import pytest
from datetime import date

from paschalion import (
    DateRangeError,
    JulianDate,
    computus,
    julian_pascha,
    offset_for_year,
    pascha_for_year,
    to_gregorian,
    to_julian,
    weekday_index,
)
from paschalion.reckoning.paschalion import EARLIEST, LATEST


@pytest.mark.parametrize(
    "year, expected",
    [
        (1900, date(1900, 4, 22)),
        (2010, date(2010, 4, 4)),
        (2016, date(2016, 5, 1)),
        (2020, date(2020, 4, 19)),
        (2021, date(2021, 5, 2)),
        (2022, date(2022, 4, 24)),
        (2023, date(2023, 4, 16)),
        (2024, date(2024, 5, 5)),
        (2025, date(2025, 4, 20)),
        (2026, date(2026, 4, 12)),
        (2027, date(2027, 5, 2)),
    ],
)
def test_published_pascha_dates(year, expected):
    assert pascha_for_year(year) == expected

def test_computus_intermediate():
    assert computus(2024) == (4, 22)
    assert computus(2025) == (4, 7)
    # earliest possible Pascha
    assert computus(2010) == (3, 22)

def test_computus_within_canonical_bounds():
    seen = set()
    for year in range(1, 10000):
        md = computus(year)
        assert EARLIEST <= md <= LATEST, year
        seen.add(md)
    # the full 35-day range is reached
    assert min(seen) == (3, 22)
    assert max(seen) == (4, 25)
    assert len(seen) == 35

def test_computus_accepts_any_integer():
    for year in (-5000, -1, 0, 10000, 123456):
        assert EARLIEST <= computus(year) <= LATEST

def test_computus_repeats_every_532_years():
    for year in range(1, 600):
        assert computus(year) == computus(year + 532)

def test_pascha_is_always_a_sunday():
    for year in range(1, 10000):
        assert weekday_index(pascha_for_year(year)) == 0, year

def test_julian_pascha_matches_computus():
    for year in range(1583, 2500):
        month, day = computus(year)
        j = julian_pascha(year)
        assert (j.month, j.day) == (month, day)
        assert j == JulianDate.from_ymd(year, month, day)

def test_julian_pascha_round_trips_through_gregorian():
    for year in range(1583, 2500):
        g = pascha_for_year(year)
        assert to_julian(g) == julian_pascha(year)
        assert to_gregorian(julian_pascha(year)) == g
        assert (g - date(year, *computus(year))).days == offset_for_year(year)

def test_pascha_out_of_host_range():
    with pytest.raises(DateRangeError):
        pascha_for_year(0)
    with pytest.raises(DateRangeError):
        pascha_for_year(10000)
    with pytest.raises(ValueError):
        julian_pascha(-3)

def test_pascha_is_idempotent():
    assert pascha_for_year(2024) == pascha_for_year(2024)
    assert julian_pascha(2024) == julian_pascha(2024)
