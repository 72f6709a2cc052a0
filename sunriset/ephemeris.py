"""Low-precision analytical solar ephemeris.

All functions take an epoch expressed in days since 2000 Jan 0.0 UT (see
:mod:`sunriset.epoch`) and return angles in degrees. The orbit is a first-order
Keplerian ellipse: the eccentric anomaly is obtained with a single correction
step rather than an iterated solve, which keeps rise/set times within about a
minute of almanac values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .angles import RADEG, atan2d, cosd, revolution, sind

__all__ = [
    "SolarPosition",
    "EquatorialPosition",
    "sun_position",
    "obliquity",
    "equatorial_position",
    "sidereal_time_at_epoch",
]

# Mean elements of the Earth-Sun orbit at 2000 Jan 0.0 and their daily rates.
MEAN_ANOMALY_DEG = 356.0470
MEAN_ANOMALY_RATE = 0.9856002585
PERIHELION_DEG = 282.9404
PERIHELION_RATE = 4.70935e-5
ECCENTRICITY = 0.016709
ECCENTRICITY_RATE = -1.151e-9
OBLIQUITY_DEG = 23.4393
OBLIQUITY_RATE = -3.563e-7


@dataclass(frozen=True)
class SolarPosition:
    """Ecliptic position of the Sun (latitude is taken as zero)."""

    longitude: float  # True ecliptic longitude, degrees in [0, 360)
    distance: float  # Earth-Sun distance, astronomical units


@dataclass(frozen=True)
class EquatorialPosition:
    """Equatorial position of the Sun."""

    right_ascension: float  # Degrees in (-180, 180]
    declination: float  # Degrees
    distance: float  # Astronomical units


def sun_position(epoch: float) -> SolarPosition:
    """Return the Sun's true ecliptic longitude and distance at *epoch*."""

    mean_anomaly = revolution(MEAN_ANOMALY_DEG + MEAN_ANOMALY_RATE * epoch)
    perihelion = PERIHELION_DEG + PERIHELION_RATE * epoch
    e = ECCENTRICITY + ECCENTRICITY_RATE * epoch

    eccentric_anomaly = mean_anomaly + e * RADEG * sind(mean_anomaly) * (
        1.0 + e * cosd(mean_anomaly)
    )
    x = cosd(eccentric_anomaly) - e
    y = math.sqrt(1.0 - e * e) * sind(eccentric_anomaly)

    distance = math.sqrt(x * x + y * y)
    true_anomaly = atan2d(y, x)
    return SolarPosition(
        longitude=revolution(true_anomaly + perihelion), distance=distance
    )


def obliquity(epoch: float) -> float:
    """Obliquity of the ecliptic in degrees."""

    return OBLIQUITY_DEG + OBLIQUITY_RATE * epoch


def equatorial_position(epoch: float) -> EquatorialPosition:
    """Return the Sun's right ascension, declination and distance at *epoch*."""

    ecliptic = sun_position(epoch)
    r = ecliptic.distance

    # Ecliptic rectangular coordinates (z = 0), rotated about the x axis.
    x = r * cosd(ecliptic.longitude)
    y_ecl = r * sind(ecliptic.longitude)
    eps = obliquity(epoch)
    z = y_ecl * sind(eps)
    y = y_ecl * cosd(eps)

    return EquatorialPosition(
        right_ascension=atan2d(y, x),
        declination=atan2d(z, math.sqrt(x * x + y * y)),
        distance=r,
    )


def sidereal_time_at_epoch(epoch: float) -> float:
    """Greenwich mean sidereal time "at 0h UT", evaluated at any epoch.

    Defined as GMST0 = GMST - UT, which equals the Sun's mean longitude plus
    180 degrees when aberration is neglected. Adding the UT clock time (in
    degrees) and the longitude gives local sidereal time.
    """

    return revolution(
        (180.0 + MEAN_ANOMALY_DEG + PERIHELION_DEG)
        + (MEAN_ANOMALY_RATE + PERIHELION_RATE) * epoch
    )
