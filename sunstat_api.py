"""FastAPI application exposing sunrise, sunset and day-length computations."""

from __future__ import annotations

import json
import logging
import os
import time
from datetime import UTC, datetime, timedelta, timezone
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from models import (
    DayLengthResponse,
    ErrorResponse,
    HealthResponse,
    LocationQueryParams,
    SunQueryParams,
    SunResponse,
)
from sunriset import __version__
from sunriset.astro import (
    ASTRONOMICAL_TWILIGHT,
    CIVIL_TWILIGHT,
    NAUTICAL_TWILIGHT,
    GeoCoordinate,
    compute_sun_times,
    day_astronomical_twilight_length,
    day_civil_twilight_length,
    day_length,
    day_nautical_twilight_length,
    twilight_duration,
)

logging.basicConfig(level=logging.INFO, format="%(message)s")
LOGGER = logging.getLogger("sunstat-api")

APP_DESCRIPTION = (
    "Sunrise, sunset and twilight times from a closed-form solar position model"
)


def _cors_origins() -> List[str]:
    raw = os.environ.get("SUNSTAT_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


app = FastAPI(
    title="Sunstat API",
    description=APP_DESCRIPTION,
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _format_utc(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return dt.astimezone(UTC).isoformat().replace("+00:00", "Z")


def _format_local(dt: Optional[datetime], offset_hours: Optional[float]) -> Optional[str]:
    if dt is None or offset_hours is None:
        return None
    offset = timezone(timedelta(hours=offset_hours))
    return dt.astimezone(offset).isoformat()


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(code=code, error=message)
    LOGGER.error(json.dumps({"event": "error", "code": code, "message": message}))
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = ", ".join(error["msg"] for error in exc.errors())
    return _error_response(422, "validation_error", messages)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    detail = exc.detail
    if isinstance(detail, dict):
        message = detail.get("error") or detail.get("message") or str(detail)
    elif isinstance(detail, list):
        message = ", ".join(str(item) for item in detail)
    else:
        message = str(detail)
    return _error_response(exc.status_code, f"http_{exc.status_code}", message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled exception", exc_info=exc)
    return _error_response(500, "internal_error", "Unhandled server error")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True, model="sunriset", version=__version__)


@app.get(
    "/sun",
    response_model=SunResponse,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def sun_endpoint(params: SunQueryParams = Depends()) -> SunResponse:
    start_time = time.perf_counter()
    try:
        result = compute_sun_times(
            date_utc=params.date_utc,
            lat=params.lat,
            lon=params.lon,
            twilight=params.twilight.value,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    crossing = result["crossing"]
    duration_ms = (time.perf_counter() - start_time) * 1000.0

    response = SunResponse(
        status=result["status"],
        date_utc=params.date_utc,
        latitude=params.lat,
        longitude=params.lon,
        twilight=params.twilight,
        rise_ut_hours=crossing.rise_ut,
        set_ut_hours=crossing.set_ut,
        south_ut_hours=crossing.south_ut,
        sunrise_utc=_format_utc(result["sunrise"]),
        sunset_utc=_format_utc(result["sunset"]),
        south_utc=_format_utc(result["south"]),
        offset_hours=params.offset_hours,
        sunrise_local=_format_local(result["sunrise"], params.offset_hours),
        sunset_local=_format_local(result["sunset"], params.offset_hours),
        day_length_hours=result["day_length_hours"],
    )

    LOGGER.info(
        json.dumps(
            {
                "event": "sun",
                "lat": params.lat,
                "lon": params.lon,
                "date": params.date_utc.isoformat(),
                "twilight": params.twilight.value,
                "status": response.status.value,
                "duration_ms": round(duration_ms, 3),
            }
        )
    )
    return response


@app.get(
    "/daylength",
    response_model=DayLengthResponse,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def daylength_endpoint(params: LocationQueryParams = Depends()) -> DayLengthResponse:
    day = params.date_utc
    coordinate = GeoCoordinate(latitude=params.lat, longitude=params.lon)
    args = (day.year, day.month, day.day, coordinate)

    response = DayLengthResponse(
        date_utc=day,
        latitude=params.lat,
        longitude=params.lon,
        day_length_hours=day_length(*args),
        civil_length_hours=day_civil_twilight_length(*args),
        nautical_length_hours=day_nautical_twilight_length(*args),
        astronomical_length_hours=day_astronomical_twilight_length(*args),
        civil_twilight_hours=twilight_duration(*args, CIVIL_TWILIGHT),
        nautical_twilight_hours=twilight_duration(*args, NAUTICAL_TWILIGHT),
        astronomical_twilight_hours=twilight_duration(*args, ASTRONOMICAL_TWILIGHT),
    )
    LOGGER.info(
        json.dumps(
            {
                "event": "daylength",
                "lat": params.lat,
                "lon": params.lon,
                "date": day.isoformat(),
                "day_length_hours": round(response.day_length_hours, 6),
            }
        )
    )
    return response
