"""Command line entry point: print access statistics for a log file."""

import argparse
import logging
import sys

from accesstally.core.analyzer import LogAnalyzer
from accesstally.core.encoding.ndjson import encode_histograms, encode_summary
from accesstally.core.exceptions import InitializationError, OutOfRangeError

MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="accesstally",
        description="Hour, day and month access statistics for a web log",
    )
    p.add_argument("file", help="Path to log file")
    p.add_argument("--json", action="store_true", help="Output JSON summary")
    p.add_argument(
        "--ndjson", action="store_true", help="Output every counter as NDJSON"
    )
    p.add_argument("--hourly", action="store_true", help="Print the hourly counts")
    p.add_argument(
        "--wrap",
        action="store_true",
        help="Wrap out-of-range fields instead of failing",
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return p


def print_summary(summary: dict[str, int]) -> None:
    print(f"Total accesses: {summary['number_of_accesses']}")
    print(f"Busiest hour: {summary['busiest_hour']}")
    print(f"Quietest hour: {summary['quietest_hour']}")
    start = summary["busiest_two_hour"]
    print(f"Busiest two hours: {start}-{(start + 2) % 24}")
    print(f"Busiest day: {summary['busiest_day']}")
    print(f"Quietest day: {summary['quietest_day']}")
    print(f"Busiest month: {MONTH_NAMES[summary['busiest_month']]}")
    print(f"Quietest month: {MONTH_NAMES[summary['quietest_month']]}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        analyzer = LogAnalyzer(
            args.file, out_of_range="wrap" if args.wrap else "raise"
        )
        analyzer.analyze_all_data()
    except (InitializationError, OutOfRangeError) as e:
        print(f"accesstally: {e}", file=sys.stderr)
        return 1

    if args.ndjson:
        sys.stdout.write(encode_histograms(analyzer.histograms()))
    elif args.json:
        print(encode_summary(analyzer.summary()))
    else:
        print_summary(analyzer.summary())
    if args.hourly:
        analyzer.print_hourly_counts()
    return 0


if __name__ == "__main__":
    sys.exit(main())
