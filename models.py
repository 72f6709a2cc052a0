"""Pydantic models for API requests and responses."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Twilight(str, Enum):
    """Enumeration of supported altitude thresholds."""

    official = "official"
    civil = "civil"
    nautical = "nautical"
    astronomical = "astronomical"


class Status(str, Enum):
    ok = "ok"
    polar_day = "polar_day"
    polar_night = "polar_night"


class LocationQueryParams(BaseModel):
    """Validated query parameters shared by all endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    lon: float = Field(..., ge=-180.0, le=180.0, description="Longitude in degrees, east positive")
    date_utc: date = Field(..., alias="date", description="Calendar date (YYYY-MM-DD)")


class SunQueryParams(LocationQueryParams):
    """Validated query parameters for the ``/sun`` endpoint."""

    offset_hours: Optional[float] = Field(
        None,
        ge=-24.0,
        le=24.0,
        description="Optional fixed offset in hours applied to derive local times",
    )
    twilight: Twilight = Field(Twilight.official, description="Altitude threshold")


class SunResponse(BaseModel):
    """Successful rise/set response payload."""

    ok: bool = True
    status: Status = Field(..., description="ok, polar_day or polar_night")
    date_utc: date = Field(..., description="Requested date")
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")
    twilight: Twilight = Field(..., description="Applied altitude threshold")
    rise_ut_hours: float = Field(
        ..., description="Rise time in hours UT; placeholder unless status is ok"
    )
    set_ut_hours: float = Field(
        ..., description="Set time in hours UT; placeholder unless status is ok"
    )
    south_ut_hours: float = Field(..., description="Meridian transit in hours UT")
    sunrise_utc: Optional[str] = Field(None, description="Rise time in UTC (ISO-8601)")
    sunset_utc: Optional[str] = Field(None, description="Set time in UTC (ISO-8601)")
    south_utc: str = Field(..., description="Meridian transit in UTC (ISO-8601)")
    offset_hours: Optional[float] = Field(None, description="User-specified offset in hours")
    sunrise_local: Optional[str] = Field(
        None, description="Rise time expressed in local time when offset provided"
    )
    sunset_local: Optional[str] = Field(
        None, description="Set time expressed in local time when offset provided"
    )
    day_length_hours: float = Field(
        ..., ge=0.0, le=24.0, description="Hours the Sun spends above the threshold"
    )
    source: Literal["SUNRISET"] = Field("SUNRISET", description="Solar model identifier")


class DayLengthResponse(BaseModel):
    """Durations above each threshold, in hours."""

    ok: bool = True
    date_utc: date
    latitude: float
    longitude: float
    day_length_hours: float = Field(..., ge=0.0, le=24.0)
    civil_length_hours: float = Field(..., ge=0.0, le=24.0)
    nautical_length_hours: float = Field(..., ge=0.0, le=24.0)
    astronomical_length_hours: float = Field(..., ge=0.0, le=24.0)
    civil_twilight_hours: float = Field(..., description="One morning or evening civil band")
    nautical_twilight_hours: float
    astronomical_twilight_hours: float


class HealthResponse(BaseModel):
    """Health-check response."""

    ok: bool = True
    model: str
    version: str


class ErrorResponse(BaseModel):
    """Error payload."""

    ok: bool = False
    code: str
    error: str
