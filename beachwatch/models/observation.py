"""Normalized weather observation models."""

import math
from dataclasses import dataclass
from enum import StrEnum

METERS_PER_MILE = 1609.34


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 ties going up, unlike round()."""
    return math.floor(value + 0.5)


class ConditionCategory(StrEnum):
    CLEAR = "clear"
    CLOUDS = "clouds"
    RAIN = "rain"
    DRIZZLE = "drizzle"
    THUNDERSTORM = "thunderstorm"
    OTHER = "other"


@dataclass(frozen=True)
class Observation:
    """Current conditions for one beach, in imperial units, unrounded."""

    air_temperature_f: float
    feels_like_f: float
    humidity_pct: float
    wind_speed_mph: float
    wind_gust_mph: float | None
    wind_direction_deg: float
    condition_category: ConditionCategory
    condition_keyword: str
    condition_description: str
    visibility_miles: float
    pressure_hpa: float
    cloud_cover_pct: float
    observed_at_local_hour: int

    def to_snapshot(self) -> "WeatherSnapshot":
        return WeatherSnapshot(
            temperature=round_half_up(self.air_temperature_f),
            feels_like=round_half_up(self.feels_like_f),
            humidity=self.humidity_pct,
            wind_speed=round_half_up(self.wind_speed_mph),
            wind_direction=self.wind_direction_deg,
            wind_gust=(
                round_half_up(self.wind_gust_mph)
                if self.wind_gust_mph is not None
                else None
            ),
            conditions=self.condition_keyword,
            description=self.condition_description,
            visibility=math.floor(self.visibility_miles * 10 + 0.5) / 10,
            pressure=self.pressure_hpa,
            cloud_cover=self.cloud_cover_pct,
        )


@dataclass(frozen=True)
class WeatherSnapshot:
    """Display values for a report; never fed back into classification."""

    temperature: int
    feels_like: int
    humidity: float
    wind_speed: int
    wind_direction: float
    wind_gust: int | None
    conditions: str
    description: str
    visibility: float  # miles, one decimal
    pressure: float
    cloud_cover: float
