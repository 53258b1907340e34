from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import paschalion


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def tone_month_calendar(gy: int, gm: int, *, slavonic: bool = False) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    days = []
    d = first
    while d <= last:
        j = paschalion.to_julian(d)
        tone = paschalion.tone_for_date(d)
        if slavonic:
            top = f"{d.day:2d} {paschalion.day_to_numeral(j.day)}"
        else:
            top = f"{d.day:2d}/{j.day:<2d}"
        bot = "BW" if tone is None else f"t{tone}"
        days.append((top, bot))
        d += timedelta(days=1)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for _ in range(paschalion.weekday_index(first)):
        wk.append(cell("", ""))
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    title = f"Gregorian month {gy}-{gm:02d}  (day/Julian day, tone; BW = Bright Week)"
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian month grid labelled with Julian day numbers and Octoechos tones."
    )
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2024 5)")
    p.add_argument("--slavonic", action="store_true", help="Show Julian days as Slavonic numerals.")
    args = p.parse_args(argv)

    if not args.greg:
        # month containing Pascha 2024
        tone_month_calendar(2024, 5, slavonic=args.slavonic)
        return 0

    gy, gm = args.greg
    if not 1 <= gm <= 12:
        raise SystemExit("month must be in 1..12")
    tone_month_calendar(gy, gm, slavonic=args.slavonic)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
