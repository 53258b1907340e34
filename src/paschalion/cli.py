from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    try:
        return date(y, m, d)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {s!r}: {exc}") from exc


def _today() -> date:
    return date.today()


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import paschalion

    p = argparse.ArgumentParser(prog="paschalion day", description="Gregorian -> Julian day, Pascha and tone")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    try:
        info = paschalion.day_info(args.date, attributes=tuple(args.attr), debug=args.debug)
    except (KeyError, paschalion.DateRangeError) as exc:
        p.error(str(exc))
    print(info)
    return 0


def cmd_today(argv: list[str]) -> int:
    import paschalion

    p = argparse.ArgumentParser(prog="paschalion today", description="Church Slavonic date line (Julian reckoning)")
    p.add_argument("--date", type=_parse_ymd, default=None, help="YYYY-MM-DD (default: today)")
    args = p.parse_args(argv)

    d = args.date if args.date is not None else _today()
    try:
        line = paschalion.date_line(d)
    except paschalion.DateRangeError as exc:
        p.error(str(exc))
    print(line)
    return 0


def cmd_pascha(argv: list[str]) -> int:
    import paschalion

    p = argparse.ArgumentParser(prog="paschalion pascha", description="Date of Pascha for the given years")
    p.add_argument("years", type=int, nargs="+", metavar="YEAR")
    p.add_argument("--julian", action="store_true", help="also print the Julian-calendar date")
    args = p.parse_args(argv)

    for year in args.years:
        try:
            greg = paschalion.pascha_for_year(year)
        except paschalion.DateRangeError as exc:
            p.error(str(exc))
        if args.julian:
            jul = paschalion.julian_pascha(year)
            print(f"{year}  {greg.isoformat()}  (Julian {jul.isoformat()})")
        else:
            print(f"{year}  {greg.isoformat()}")
    return 0


def cmd_tone(argv: list[str]) -> int:
    import paschalion

    p = argparse.ArgumentParser(prog="paschalion tone", description="Octoechos tone of the week")
    p.add_argument("date", type=_parse_ymd, nargs="?", default=None, help="YYYY-MM-DD (default: today)")
    args = p.parse_args(argv)

    d = args.date if args.date is not None else _today()
    try:
        tone = paschalion.tone_for_date(d)
    except paschalion.DateRangeError as exc:
        p.error(str(exc))
    if tone is None:
        print(f"{d.isoformat()}  Bright Week (no tone)")
    else:
        print(f"{d.isoformat()}  tone {tone}  {paschalion.tone_label(tone)}")
    return 0


def cmd_numeral(argv: list[str]) -> int:
    import paschalion

    p = argparse.ArgumentParser(prog="paschalion numeral", description="Church Slavonic numerals for 1..31")
    p.add_argument("numbers", type=int, nargs="+", metavar="N")
    args = p.parse_args(argv)

    for n in args.numbers:
        s = paschalion.day_to_numeral(n)
        print(f"{n:>2}  {s if s else '(out of range)'}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `paschalion YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="paschalion", description="Julian calendar, Paschalion and Octoechos toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Julian day, Pascha and tone", add_help=False)
    sub.add_parser("today", help="Church Slavonic date line for today", add_help=False)
    sub.add_parser("pascha", help="Date of Pascha for the given years", add_help=False)
    sub.add_parser("tone", help="Octoechos tone of the week", add_help=False)
    sub.add_parser("numeral", help="Church Slavonic numerals", add_help=False)

    # diagnostics
    sub.add_parser("pascha-table", help="Print Pascha table over a year range (diagnostics)", add_help=False)
    sub.add_parser("tone-month", help="Print a Gregorian month with Julian days and tones (diagnostics)", add_help=False)
    sub.add_parser("round-trip", help="Random Gregorian -> Julian -> Gregorian checks (diagnostics)", add_help=False)

    args, rest = p.parse_known_args(argv)

    commands = {
        "day": cmd_day,
        "today": cmd_today,
        "pascha": cmd_pascha,
        "tone": cmd_tone,
        "numeral": cmd_numeral,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    tool_map = {
        "pascha-table": "paschalion.diagnostics.pascha_table",
        "tone-month": "paschalion.diagnostics.tone_month",
        "round-trip": "paschalion.diagnostics.round_trip",
    }
    if args.cmd in tool_map:
        return _run_module_main(tool_map[args.cmd], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
