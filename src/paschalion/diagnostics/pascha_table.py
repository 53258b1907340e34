from __future__ import annotations

from datetime import date
import argparse

import paschalion


def mmdd(month: int, day: int) -> str:
    return f"{month:02d}-{day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a table of Pascha dates (Julian and Gregorian) over a range of years."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=5,
        help="After the table, list the years whose Gregorian Pascha falls in this month (default: 5=May).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: date) -> str:
        return mmdd(d.month, d.day) if args.dates == "mmdd" else d.isoformat()

    headers = ["Year", "Julian", "Gregorian", "Thomas", "Offset"]
    colw = [5] + [max(10 if args.dates == "iso" else 6, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[tuple[date, int]] = []

    for Y in range(Y0, Y1 + 1):
        try:
            greg = paschalion.pascha_for_year(Y)
        except paschalion.DateRangeError as exc:
            raise SystemExit(str(exc))
        jul = paschalion.julian_pascha(Y)
        thomas = paschalion.thomas_sunday(Y)
        cells = [
            str(Y),
            fmt(jul.carrier),
            fmt(greg),
            fmt(thomas),
            str(paschalion.offset_for_year(Y)),
        ]
        print("  ".join(c.ljust(w) for c, w in zip(cells, colw)))
        if greg.month == args.list_month:
            hits.append((greg, Y))

    print(f"\nPascha occurrences in month={args.list_month:02d}:")
    if not hits:
        print("(none)")
        return 0

    for d, Y in sorted(hits):
        print(f"{d.isoformat()}  (Y={Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
