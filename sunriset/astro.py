"""Sunrise, sunset and twilight computations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import ClassVar, Dict, Optional

import numpy as np

from .angles import acosd, cosd, rev180, revolution, sind
from .ephemeris import equatorial_position, obliquity, sidereal_time_at_epoch, sun_position
from .epoch import local_noon_epoch

__all__ = [
    "GeoCoordinate",
    "AltitudeThreshold",
    "SUNRISE_SUNSET",
    "CIVIL_TWILIGHT",
    "NAUTICAL_TWILIGHT",
    "ASTRONOMICAL_TWILIGHT",
    "TWILIGHT_THRESHOLDS",
    "CrossingResult",
    "Normal",
    "AlwaysAbove",
    "AlwaysBelow",
    "solve_crossing",
    "solve_duration",
    "sun_rise_set",
    "civil_twilight",
    "nautical_twilight",
    "astronomical_twilight",
    "day_length",
    "day_civil_twilight_length",
    "day_nautical_twilight_length",
    "day_astronomical_twilight_length",
    "twilight_duration",
    "threshold_for",
    "compute_sun_times",
]

SOLAR_RADIUS_AU_DEG = 0.2666  # Apparent solar radius in degrees at 1 AU.


@dataclass(frozen=True)
class GeoCoordinate:
    """Observer position in degrees, north and east positive."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class AltitudeThreshold:
    """Solar altitude defining an event.

    With ``upper_limb`` set the apparent solar radius is subtracted, so the
    event happens when the upper edge of the disc touches the altitude rather
    than the centre.
    """

    altitude: float
    upper_limb: bool = False


SUNRISE_SUNSET = AltitudeThreshold(-35.0 / 60.0, upper_limb=True)
CIVIL_TWILIGHT = AltitudeThreshold(-6.0)
NAUTICAL_TWILIGHT = AltitudeThreshold(-12.0)
ASTRONOMICAL_TWILIGHT = AltitudeThreshold(-18.0)

TWILIGHT_THRESHOLDS: Dict[str, AltitudeThreshold] = {
    "official": SUNRISE_SUNSET,
    "civil": CIVIL_TWILIGHT,
    "nautical": NAUTICAL_TWILIGHT,
    "astronomical": ASTRONOMICAL_TWILIGHT,
}


@dataclass(frozen=True)
class CrossingResult:
    """Rise and set times in fractional hours UT.

    Only :class:`Normal` holds real crossing instants. The other variants
    carry placeholder times derived from the meridian transit so that
    ``south_ut`` is always available.
    """

    rise_ut: float
    set_ut: float

    status: ClassVar[str] = ""

    @property
    def south_ut(self) -> float:
        """Time the Sun crosses the meridian, hours UT."""
        return (self.rise_ut + self.set_ut) / 2.0

    @property
    def crosses(self) -> bool:
        return False


@dataclass(frozen=True)
class Normal(CrossingResult):
    """The Sun rises above and sets below the threshold on this day."""

    status: ClassVar[str] = "ok"

    @property
    def crosses(self) -> bool:
        return True


@dataclass(frozen=True)
class AlwaysAbove(CrossingResult):
    """The Sun stays above the threshold for 24 hours."""

    status: ClassVar[str] = "polar_day"


@dataclass(frozen=True)
class AlwaysBelow(CrossingResult):
    """The Sun stays below the threshold for 24 hours."""

    status: ClassVar[str] = "polar_night"


def _corrected_altitude(threshold: AltitudeThreshold, distance: float) -> float:
    altitude = threshold.altitude
    if threshold.upper_limb:
        altitude -= SOLAR_RADIUS_AU_DEG / distance
    return altitude


def _hour_angle_cosine(
    altitude: float, latitude: float, sin_decl: float, cos_decl: float
) -> float:
    return (sind(altitude) - sind(latitude) * sin_decl) / (cosd(latitude) * cos_decl)


def _clamped_acosd(value: float) -> float:
    # Guards against rounding artefacts such as 1.0000000002.
    return acosd(float(np.clip(value, -1.0, 1.0)))


def solve_crossing(
    year: int,
    month: int,
    day: int,
    coordinate: GeoCoordinate,
    threshold: AltitudeThreshold,
) -> CrossingResult:
    """Compute the UT hours at which the Sun crosses *threshold*.

    Parameters
    ----------
    year, month, day:
        Calendar date, documented for 1801-2099.
    coordinate:
        Observer latitude and longitude in degrees (east-positive longitude).
        The longitude matters here: it places the meridian transit in UT.
    threshold:
        Altitude the Sun should cross.

    Returns
    -------
    CrossingResult
        :class:`Normal` with rise and set times; :class:`AlwaysAbove` with
        rise/set at transit -/+ 12 hours; or :class:`AlwaysBelow` with both
        times at transit. Times may fall outside [0, 24) and are left for the
        caller to roll over.
    """

    epoch = local_noon_epoch(year, month, day, coordinate.longitude)
    sidereal = revolution(sidereal_time_at_epoch(epoch) + 180.0 + coordinate.longitude)
    position = equatorial_position(epoch)

    south = 12.0 - rev180(sidereal - position.right_ascension) / 15.0
    altitude = _corrected_altitude(threshold, position.distance)

    cos_t = _hour_angle_cosine(
        altitude,
        coordinate.latitude,
        sind(position.declination),
        cosd(position.declination),
    )
    if cos_t >= 1.0:
        return AlwaysBelow(rise_ut=south, set_ut=south)
    if cos_t <= -1.0:
        return AlwaysAbove(rise_ut=south - 12.0, set_ut=south + 12.0)

    half_arc = _clamped_acosd(cos_t) / 15.0
    return Normal(rise_ut=south - half_arc, set_ut=south + half_arc)


def solve_duration(
    year: int,
    month: int,
    day: int,
    coordinate: GeoCoordinate,
    threshold: AltitudeThreshold,
) -> float:
    """Return the hours in [0, 24] the Sun spends above *threshold*.

    Only the latitude is critical; the longitude shifts the evaluation epoch
    by a fraction of a day.
    """

    epoch = local_noon_epoch(year, month, day, coordinate.longitude)
    ecliptic = sun_position(epoch)

    sin_decl = sind(obliquity(epoch)) * sind(ecliptic.longitude)
    cos_decl = (1.0 - sin_decl * sin_decl) ** 0.5
    altitude = _corrected_altitude(threshold, ecliptic.distance)

    cos_t = _hour_angle_cosine(altitude, coordinate.latitude, sin_decl, cos_decl)
    if cos_t >= 1.0:
        return 0.0
    if cos_t <= -1.0:
        return 24.0
    return (2.0 / 15.0) * _clamped_acosd(cos_t)


def sun_rise_set(year: int, month: int, day: int, coordinate: GeoCoordinate) -> CrossingResult:
    return solve_crossing(year, month, day, coordinate, SUNRISE_SUNSET)


def civil_twilight(year: int, month: int, day: int, coordinate: GeoCoordinate) -> CrossingResult:
    return solve_crossing(year, month, day, coordinate, CIVIL_TWILIGHT)


def nautical_twilight(year: int, month: int, day: int, coordinate: GeoCoordinate) -> CrossingResult:
    return solve_crossing(year, month, day, coordinate, NAUTICAL_TWILIGHT)


def astronomical_twilight(
    year: int, month: int, day: int, coordinate: GeoCoordinate
) -> CrossingResult:
    return solve_crossing(year, month, day, coordinate, ASTRONOMICAL_TWILIGHT)


def day_length(year: int, month: int, day: int, coordinate: GeoCoordinate) -> float:
    return solve_duration(year, month, day, coordinate, SUNRISE_SUNSET)


def day_civil_twilight_length(year: int, month: int, day: int, coordinate: GeoCoordinate) -> float:
    return solve_duration(year, month, day, coordinate, CIVIL_TWILIGHT)


def day_nautical_twilight_length(
    year: int, month: int, day: int, coordinate: GeoCoordinate
) -> float:
    return solve_duration(year, month, day, coordinate, NAUTICAL_TWILIGHT)


def day_astronomical_twilight_length(
    year: int, month: int, day: int, coordinate: GeoCoordinate
) -> float:
    return solve_duration(year, month, day, coordinate, ASTRONOMICAL_TWILIGHT)


def twilight_duration(
    year: int,
    month: int,
    day: int,
    coordinate: GeoCoordinate,
    threshold: AltitudeThreshold,
) -> float:
    """Length in hours of a single morning (or evening) twilight band.

    The band runs from the moment the Sun crosses *threshold* to sunrise.
    """

    total = solve_duration(year, month, day, coordinate, threshold)
    daylight = solve_duration(year, month, day, coordinate, SUNRISE_SUNSET)
    return (total - daylight) / 2.0


def threshold_for(twilight: str) -> AltitudeThreshold:
    try:
        return TWILIGHT_THRESHOLDS[twilight]
    except KeyError as exc:
        raise ValueError(f"Unsupported twilight selector: {twilight}") from exc


def _ut_to_datetime(day_utc: date, ut_hours: float) -> datetime:
    midnight = datetime.combine(day_utc, datetime.min.time(), tzinfo=UTC)
    return midnight + timedelta(hours=ut_hours)


def compute_sun_times(
    date_utc: date,
    lat: float,
    lon: float,
    twilight: str,
) -> Dict[str, object]:
    """Compute rise and set instants for the given date and location.

    Parameters
    ----------
    date_utc:
        Calendar date; returned instants are relative to its 0h UT.
    lat, lon:
        Geographic coordinates in degrees (east-positive longitude).
    twilight:
        Threshold key, one of :data:`TWILIGHT_THRESHOLDS`.

    Returns
    -------
    dict
        ``status``, ``crossing`` (the :class:`CrossingResult`), ``sunrise``
        and ``sunset`` (aware UTC datetimes, ``None`` when the threshold is
        not crossed), ``south`` and ``day_length_hours``.
    """

    threshold = threshold_for(twilight)
    coordinate = GeoCoordinate(latitude=lat, longitude=lon)
    crossing = solve_crossing(date_utc.year, date_utc.month, date_utc.day, coordinate, threshold)
    duration = solve_duration(date_utc.year, date_utc.month, date_utc.day, coordinate, threshold)

    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None
    if crossing.crosses:
        sunrise = _ut_to_datetime(date_utc, crossing.rise_ut)
        sunset = _ut_to_datetime(date_utc, crossing.set_ut)

    return {
        "status": crossing.status,
        "crossing": crossing,
        "sunrise": sunrise,
        "sunset": sunset,
        "south": _ut_to_datetime(date_utc, crossing.south_ut),
        "day_length_hours": duration,
    }
