"""Reduce an OpenWeather current-weather payload to an Observation."""

import logging
from collections.abc import Mapping
from typing import Any

from beachwatch.errors import MalformedPayloadError, UpstreamUnavailableError
from beachwatch.ingest.conditions import categorize_condition
from beachwatch.models.observation import METERS_PER_MILE, Observation

logger = logging.getLogger(__name__)


def normalize(raw: Mapping[str, Any] | None, evaluation_hour: int) -> Observation:
    """Validate a raw payload and convert it to the internal observation record.

    Required fields are never defaulted: a missing temperature or wind value
    would silently corrupt the safety verdict. Wind gust is the only
    optional field and stays None when absent.

    Args:
        raw: Decoded JSON from the provider's current-weather endpoint
            (imperial units).
        evaluation_hour: Local hour of day (0-23) the observation is judged at.

    Raises:
        UpstreamUnavailableError: no payload was supplied at all.
        MalformedPayloadError: a required field is missing or has a bad value.
        ValueError: evaluation_hour is outside 0-23.
    """
    if raw is None:
        raise UpstreamUnavailableError("No weather payload to normalize")
    if not isinstance(raw, Mapping):
        raise MalformedPayloadError("payload", "not a JSON object")
    if isinstance(evaluation_hour, bool) or not 0 <= evaluation_hour <= 23:
        raise ValueError(f"evaluation_hour must be in 0-23, got {evaluation_hour}")

    primary = _primary_condition(raw)
    main_text = _require_str(primary, "weather[0].main")
    description = _require_str(primary, "weather[0].description")

    main = _require_section(raw, "main")
    wind = _require_section(raw, "wind")
    clouds = _require_section(raw, "clouds")

    wind_speed = _require_number(wind, "wind.speed", minimum=0.0)
    gust = _optional_number(wind, "wind.gust", minimum=0.0)
    visibility_m = _require_number(raw, "visibility", minimum=0.0)

    observation = Observation(
        air_temperature_f=_require_number(main, "main.temp"),
        feels_like_f=_require_number(main, "main.feels_like"),
        humidity_pct=_require_number(main, "main.humidity", 0.0, 100.0),
        wind_speed_mph=wind_speed,
        wind_gust_mph=gust,
        wind_direction_deg=_require_number(wind, "wind.deg", 0.0, 360.0),
        condition_category=categorize_condition(main_text),
        condition_keyword=main_text,
        condition_description=description,
        visibility_miles=visibility_m / METERS_PER_MILE,
        pressure_hpa=_require_number(main, "main.pressure"),
        cloud_cover_pct=_require_number(clouds, "clouds.all", 0.0, 100.0),
        observed_at_local_hour=evaluation_hour,
    )
    logger.debug(
        "Normalized payload: %s (%s), %.1fF, wind %.1f mph",
        main_text, observation.condition_category, observation.air_temperature_f,
        observation.wind_speed_mph,
    )
    return observation


def _primary_condition(raw: Mapping[str, Any]) -> Mapping[str, Any]:
    weather = raw.get("weather")
    if not isinstance(weather, list) or not weather:
        raise MalformedPayloadError("weather")
    if not isinstance(weather[0], Mapping):
        raise MalformedPayloadError("weather[0]", "not an object")
    return weather[0]


def _require_section(raw: Mapping[str, Any], path: str) -> Mapping[str, Any]:
    section = raw.get(path)
    if section is None:
        raise MalformedPayloadError(path)
    if not isinstance(section, Mapping):
        raise MalformedPayloadError(path, "not an object")
    return section


def _require_str(section: Mapping[str, Any], path: str) -> str:
    value = section.get(path.rsplit(".", 1)[-1])
    if value is None:
        raise MalformedPayloadError(path)
    if not isinstance(value, str):
        raise MalformedPayloadError(path, "not a string")
    return value


def _require_number(
    section: Mapping[str, Any],
    path: str,
    minimum: float | None = None,
    maximum: float | None = None,
) -> float:
    value = section.get(path.rsplit(".", 1)[-1])
    if value is None:
        raise MalformedPayloadError(path)
    return _check_number(value, path, minimum, maximum)


def _optional_number(
    section: Mapping[str, Any], path: str, minimum: float | None = None
) -> float | None:
    value = section.get(path.rsplit(".", 1)[-1])
    if value is None:
        return None
    return _check_number(value, path, minimum, None)


def _check_number(
    value: Any, path: str, minimum: float | None, maximum: float | None
) -> float:
    # bool is an int subclass; a JSON true is never a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedPayloadError(path, "not a number")
    if value != value:
        raise MalformedPayloadError(path, "not a number")
    if minimum is not None and value < minimum:
        raise MalformedPayloadError(path, f"below {minimum:g}")
    if maximum is not None and value > maximum:
        raise MalformedPayloadError(path, f"above {maximum:g}")
    return float(value)
