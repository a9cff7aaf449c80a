"""CLI entrypoint for banking-day lookups."""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .banking_day import check_if_banking_day, next_banking_day
from .config import CalendarConfig, load_config
from .dst import dst_bounds
from .resolver import observed_holidays
from .time_utils import format_utc_iso, parse_timestamp, to_et


def _timestamp_arg(cfg: CalendarConfig):
    def _parse(raw: str):
        try:
            return parse_timestamp(raw, naive_ts_mode=cfg.naive_ts_mode)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"invalid timestamp {raw!r}: {exc}") from exc

    return _parse


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected an integer >= 1, got {raw!r}")
    return value


def build_parser(cfg: CalendarConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fedbankday", description="Federal Reserve banking-day calendar"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_next = sub.add_parser("next", help="Next banking day after a timestamp")
    p_next.add_argument("when", type=_timestamp_arg(cfg), help="ISO-8601 timestamp")
    p_next.add_argument("--count", type=_positive_int, default=1, help="Banking days to advance")
    p_next.add_argument(
        "--business-hours",
        action=argparse.BooleanOptionalAction,
        default=cfg.use_business_hours,
        help="Anchor to 09:00-17:00 Eastern business hours",
    )

    p_check = sub.add_parser("check", help="Is the timestamp's Eastern date a banking day")
    p_check.add_argument("when", type=_timestamp_arg(cfg), help="ISO-8601 timestamp")

    p_dst = sub.add_parser("dst", help="Eastern DST boundaries")
    p_dst.add_argument("years", type=int, nargs="+")

    p_hol = sub.add_parser("holidays", help="Observed Fed holidays for a year")
    p_hol.add_argument("year", type=int)
    return parser


def _cmd_next(args: argparse.Namespace, cfg: CalendarConfig, console: Console) -> None:
    result = next_banking_day(
        args.when,
        args.count,
        use_business_hours=args.business_hours,
        max_walk_days=cfg.max_walk_days,
    )
    line = Text(format_utc_iso(result.day), style="bold")
    line.append(f"  ({to_et(result.day).strftime('%a %Y-%m-%d %H:%M %Z')})", style="dim")
    console.print(line)
    if result.holiday:
        console.print(Text(f"skipped holiday: {result.holiday}", style="yellow"))


def _cmd_check(args: argparse.Namespace, console: Console) -> None:
    is_bank_day, holiday = check_if_banking_day(args.when)
    day = to_et(args.when).strftime("%a %Y-%m-%d")
    if is_bank_day:
        console.print(Text(f"{day}: banking day", style="green"))
    elif holiday:
        console.print(Text(f"{day}: closed ({holiday})", style="red"))
    else:
        console.print(Text(f"{day}: closed (weekend)", style="red"))


def _cmd_dst(args: argparse.Namespace, console: Console) -> None:
    table = Table(title="U.S. Eastern DST")
    table.add_column("Year", justify="right")
    table.add_column("Start (UTC)")
    table.add_column("End (UTC)")
    for year in args.years:
        start, end = dst_bounds(year)
        table.add_row(str(year), format_utc_iso(start), format_utc_iso(end))
    console.print(table)


def _cmd_holidays(args: argparse.Namespace, console: Console) -> None:
    table = Table(title=f"Federal Reserve holidays {args.year}")
    table.add_column("Observed")
    table.add_column("Day")
    table.add_column("Holiday")
    for day, name in observed_holidays(args.year):
        style = "dim" if day.weekday() >= 5 else None
        table.add_row(day.isoformat(), day.strftime("%a"), name, style=style)
    console.print(table)


def main(argv: Sequence[str] | None = None, *, console: Console | None = None) -> None:
    cfg = load_config()
    args = build_parser(cfg).parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    console = console or Console()
    if args.command == "next":
        _cmd_next(args, cfg, console)
    elif args.command == "check":
        _cmd_check(args, console)
    elif args.command == "dst":
        _cmd_dst(args, console)
    elif args.command == "holidays":
        _cmd_holidays(args, console)


if __name__ == "__main__":
    main()
