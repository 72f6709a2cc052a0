"""Command-line sunrise, sunset and twilight report.

Usage:
    sunstat +40.6611 -73.9439
    sunstat 40.6611 -73.9439 --date 2000-06-21 --tz-offset -4 --zone EDT
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, datetime
from typing import List, Optional

from report import render_report

LOGGER = logging.getLogger("sunstat")

EPILOG = """\
Examples:
    sunstat +40.6611 -73.9439                 (machine local time zone)
    sunstat +40.6611 -73.9439 --tz-offset 0 --zone UTC
"""


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sunstat",
        description="Print sunrise, sunset and twilight times for a location.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("latitude", type=float, help="Degrees, north positive")
    parser.add_argument("longitude", type=float, help="Degrees, east positive")
    parser.add_argument("--date", type=_parse_date, default=None, help="YYYY-MM-DD (default: today)")
    parser.add_argument(
        "--tz-offset",
        type=float,
        default=None,
        help="Local clock offset from UTC in hours (default: this machine's offset)",
    )
    parser.add_argument("--zone", type=str, default=None, help="Time zone label shown after times")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(message)s")

    now = datetime.now().astimezone()
    when = args.date or now.date()
    if args.tz_offset is None:
        offset_seconds = now.utcoffset().total_seconds()
        zone = args.zone or now.tzname() or "LT"
    else:
        if not -24.0 <= args.tz_offset <= 24.0:
            parser.error("--tz-offset must be within ±24 hours")
        offset_seconds = args.tz_offset * 3600.0
        zone = args.zone or ("UTC" if args.tz_offset == 0 else "LT")

    LOGGER.info(
        json.dumps(
            {
                "event": "report",
                "lat": args.latitude,
                "lon": args.longitude,
                "date": when.isoformat(),
                "offset_seconds": offset_seconds,
            }
        )
    )
    print(
        render_report(
            when.year,
            when.month,
            when.day,
            args.latitude,
            args.longitude,
            offset_seconds,
            zone,
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
