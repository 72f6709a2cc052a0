"""Plain-text sunrise/twilight report."""

from __future__ import annotations

import math
from typing import List

from sunriset.astro import (
    AlwaysAbove,
    CrossingResult,
    GeoCoordinate,
    astronomical_twilight,
    civil_twilight,
    day_civil_twilight_length,
    nautical_twilight,
    sun_rise_set,
)

__all__ = ["local_clock", "hours_to_hms", "format_crossing", "render_report"]

_LABEL_WIDTH = 21


def local_clock(ut_hours: float, offset_seconds: float) -> str:
    """Format *ut_hours* as ``HH:MM`` on the clock *offset_seconds* east of UTC.

    Minutes are truncated. The result wraps into 00:00-23:59, so an evening
    event that falls after 0h UT is shown on the local clock of the same
    evening.
    """

    minutes = math.floor(ut_hours * 60.0) + math.floor(offset_seconds / 60.0)
    minutes %= 24 * 60
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def hours_to_hms(hours: float) -> str:
    whole = math.floor(hours)
    fraction = hours - whole
    minutes = int(60 * fraction)
    seconds = int(60 * (60 * fraction - minutes))
    return f"{whole:02d}h{minutes:02d}m{seconds:02d}s"


def format_crossing(crossing: CrossingResult, offset_seconds: float, zone: str) -> str:
    if crossing.crosses:
        rise = local_clock(crossing.rise_ut, offset_seconds)
        set_ = local_clock(crossing.set_ut, offset_seconds)
        return f"{rise} {zone}   {set_} {zone}"
    if isinstance(crossing, AlwaysAbove):
        return "---         (none)"
    return "(none)      ---"


def render_report(
    year: int,
    month: int,
    day: int,
    latitude: float,
    longitude: float,
    offset_seconds: float,
    zone: str,
) -> str:
    """Render the daily report for one location.

    *offset_seconds* and *zone* describe the local clock the times are shown
    on; they are supplied by the caller and never looked up here.
    """

    coordinate = GeoCoordinate(latitude=latitude, longitude=longitude)
    rise_set = sun_rise_set(year, month, day, coordinate)
    rows = [
        ("", rise_set),
        ("Civil twilight", civil_twilight(year, month, day, coordinate)),
        ("Nautical twilight", nautical_twilight(year, month, day, coordinate)),
        ("Astronomical twilight", astronomical_twilight(year, month, day, coordinate)),
    ]

    lines: List[str] = [" " * (_LABEL_WIDTH + 2) + "Sunrise     Sunset"]
    for label, crossing in rows:
        lines.append(f"{label:>{_LABEL_WIDTH}}  {format_crossing(crossing, offset_seconds, zone)}")
    lines.append("")

    civil_length = day_civil_twilight_length(year, month, day, coordinate)
    lines.append(f"Hours of daylight, incl. civil twilight: {hours_to_hms(civil_length)}.")
    lines.append(
        "The Sun is overhead (due south/north) at "
        f"{local_clock(rise_set.south_ut, offset_seconds)} {zone}."
    )
    return "\n".join(lines)
