"""Sunrise, sunset and twilight calculator based on a closed-form solar model."""

from .astro import (
    ASTRONOMICAL_TWILIGHT,
    CIVIL_TWILIGHT,
    NAUTICAL_TWILIGHT,
    SUNRISE_SUNSET,
    TWILIGHT_THRESHOLDS,
    AltitudeThreshold,
    AlwaysAbove,
    AlwaysBelow,
    CrossingResult,
    GeoCoordinate,
    Normal,
    compute_sun_times,
    solve_crossing,
    solve_duration,
    threshold_for,
)
from .epoch import days_since_2000

__all__ = [
    "compute_sun_times",
    "solve_crossing",
    "solve_duration",
    "threshold_for",
    "days_since_2000",
    "GeoCoordinate",
    "AltitudeThreshold",
    "CrossingResult",
    "Normal",
    "AlwaysAbove",
    "AlwaysBelow",
    "SUNRISE_SUNSET",
    "CIVIL_TWILIGHT",
    "NAUTICAL_TWILIGHT",
    "ASTRONOMICAL_TWILIGHT",
    "TWILIGHT_THRESHOLDS",
]

__version__ = "1.0.0"
