"""Calendar date to day-count conversion."""

from __future__ import annotations

__all__ = ["days_since_2000", "local_noon_epoch"]


def _trunc_div(a: int, b: int) -> int:
    # Integer division rounding toward zero; the day-count formula is defined
    # with truncating division and (month - 9) is negative for Jan-Aug.
    return int(a / b)


def days_since_2000(year: int, month: int, day: int) -> float:
    """Return days elapsed since 2000 Jan 0.0 UT (1999 Dec 31, 0h UT).

    Uses the proleptic Gregorian day-count formula including the century
    correction, so 1900 is not treated as a leap year. Documented for
    1801-2099; other years give a consistent but unsupported value. Day
    numbers beyond the end of the month simply roll into the next month.
    """

    count = (
        367 * year
        - _trunc_div(7 * (year + _trunc_div(month + 9, 12)), 4)
        - _trunc_div(3 * (_trunc_div(year + _trunc_div(month - 9, 7), 100) + 1), 4)
        + _trunc_div(275 * month, 9)
        + day
        - 730515
    )
    return float(count)


def local_noon_epoch(year: int, month: int, day: int, longitude: float) -> float:
    """Epoch of 12h local mean solar time at *longitude* (east positive)."""

    return days_since_2000(year, month, day) + 0.5 - longitude / 360.0
