from __future__ import annotations

import math
from pathlib import Path

import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import erfa
import pytest

from sunriset.angles import acosd, atan2d, cosd, rev180, revolution, sind, tand
from sunriset.ephemeris import (
    equatorial_position,
    obliquity,
    sidereal_time_at_epoch,
    sun_position,
)
from sunriset.epoch import days_since_2000, local_noon_epoch

JD_2000_JAN_0 = 2451543.5


def _erfa_days_since_2000(year: int, month: int, day: int) -> float:
    djm0, djm = erfa.cal2jd(year, month, day)
    return float(djm0 + djm) - JD_2000_JAN_0


@pytest.mark.parametrize(
    "year, month, day",
    [
        (1801, 1, 1),
        (1850, 7, 4),
        (1900, 2, 28),
        (1900, 3, 1),
        (1999, 12, 31),
        (2000, 1, 1),
        (2000, 2, 29),
        (2000, 6, 21),
        (2024, 12, 31),
        (2099, 12, 31),
    ],
)
def test_day_count_matches_erfa(year, month, day):
    assert days_since_2000(year, month, day) == _erfa_days_since_2000(year, month, day)


def test_day_count_reference_points():
    assert days_since_2000(2000, 1, 1) == 1.0
    assert days_since_2000(1999, 12, 31) == 0.0
    assert days_since_2000(1999, 12, 30) < 0.0
    # Out-of-month days roll over instead of failing.
    assert days_since_2000(2001, 2, 29) == days_since_2000(2001, 3, 1)


def test_local_noon_epoch_shifts_with_longitude():
    assert local_noon_epoch(2000, 1, 1, 0.0) == 1.5
    assert local_noon_epoch(2000, 1, 1, 90.0) == pytest.approx(1.25)
    assert local_noon_epoch(2000, 1, 1, -180.0) == pytest.approx(2.0)


def test_degree_trigonometry():
    assert sind(30.0) == pytest.approx(0.5)
    assert cosd(60.0) == pytest.approx(0.5)
    assert tand(45.0) == pytest.approx(1.0)
    assert atan2d(1.0, -1.0) == pytest.approx(135.0)
    assert acosd(-1.0) == pytest.approx(180.0)


def test_acosd_does_not_clamp():
    with pytest.raises(ValueError):
        acosd(1.0000000002)


@pytest.mark.parametrize(
    "angle, expected",
    [(0.0, 0.0), (-30.0, 330.0), (360.0, 0.0), (725.5, 5.5), (-720.0, 0.0)],
)
def test_revolution(angle, expected):
    result = revolution(angle)
    assert result == pytest.approx(expected)
    assert 0.0 <= result < 360.0


@pytest.mark.parametrize(
    "angle, expected",
    [(190.0, -170.0), (-190.0, 170.0), (45.0, 45.0), (540.0, -180.0), (-74.4, -74.4)],
)
def test_rev180(angle, expected):
    result = rev180(angle)
    assert result == pytest.approx(expected)
    assert -180.0 <= result < 180.0


def test_sun_near_perihelion():
    position = sun_position(1.5)
    assert position.distance == pytest.approx(0.9833, abs=1e-3)
    assert position.longitude == pytest.approx(280.5, abs=0.5)


def test_sun_at_june_solstice():
    epoch = local_noon_epoch(2000, 6, 21, 0.0)
    ecliptic = sun_position(epoch)
    equatorial = equatorial_position(epoch)

    assert ecliptic.longitude == pytest.approx(90.0, abs=1.0)
    assert ecliptic.distance == pytest.approx(1.0163, abs=1e-3)
    assert equatorial.declination == pytest.approx(23.44, abs=0.02)
    assert equatorial.right_ascension == pytest.approx(90.0, abs=1.0)
    assert equatorial.distance == ecliptic.distance


def test_longitude_stays_in_range_over_century():
    for epoch in range(-36500, 36500, 97):
        longitude = sun_position(float(epoch)).longitude
        assert 0.0 <= longitude < 360.0


def test_declination_matches_ecliptic_projection():
    epoch = 4321.25
    ecliptic = sun_position(epoch)
    equatorial = equatorial_position(epoch)
    sin_decl = sind(obliquity(epoch)) * sind(ecliptic.longitude)
    assert math.sin(math.radians(equatorial.declination)) == pytest.approx(sin_decl, abs=1e-12)


def test_obliquity_decreases():
    assert obliquity(0.0) == pytest.approx(23.4393)
    assert obliquity(36525.0) < obliquity(0.0)


def test_sidereal_time_at_j2000():
    # GMST at 2000 Jan 1.5 UT is 280.46 degrees; GMST0 excludes the 12h of UT.
    gmst = revolution(sidereal_time_at_epoch(1.5) + 180.0)
    assert gmst == pytest.approx(280.46, abs=0.05)


def test_sidereal_time_gains_about_four_minutes_a_day():
    daily = rev180(sidereal_time_at_epoch(101.0) - sidereal_time_at_epoch(100.0))
    assert daily * 4.0 == pytest.approx(3.94, abs=0.01)
