"""Degree-based trigonometry and angle range reduction."""

from __future__ import annotations

import math

__all__ = [
    "RADEG",
    "DEGRAD",
    "sind",
    "cosd",
    "tand",
    "asind",
    "acosd",
    "atand",
    "atan2d",
    "revolution",
    "rev180",
]

RADEG = 180.0 / math.pi
DEGRAD = math.pi / 180.0
_INV360 = 1.0 / 360.0


def sind(x: float) -> float:
    return math.sin(x * DEGRAD)


def cosd(x: float) -> float:
    return math.cos(x * DEGRAD)


def tand(x: float) -> float:
    return math.tan(x * DEGRAD)


def asind(x: float) -> float:
    return RADEG * math.asin(x)


def acosd(x: float) -> float:
    """Inverse cosine in degrees.

    The argument is not clamped; values outside [-1, 1] raise ``ValueError``
    from :func:`math.acos`, so callers clamp first.
    """

    return RADEG * math.acos(x)


def atand(x: float) -> float:
    return RADEG * math.atan(x)


def atan2d(y: float, x: float) -> float:
    return RADEG * math.atan2(y, x)


def revolution(x: float) -> float:
    """Reduce *x* to the range [0, 360) degrees."""

    return x - 360.0 * math.floor(x * _INV360)


def rev180(x: float) -> float:
    """Reduce *x* to the range [-180, 180) degrees."""

    return x - 360.0 * math.floor(x * _INV360 + 0.5)
