"""Assembled beach report returned to callers and display layers."""

from dataclasses import dataclass
from typing import Any

from beachwatch.models.location import LocationEntry
from beachwatch.models.observation import WeatherSnapshot
from beachwatch.models.safety import SafetyAssessment


@dataclass(frozen=True)
class BeachReport:
    location: LocationEntry
    weather: WeatherSnapshot
    safety: SafetyAssessment
    generated_at: str  # ISO-8601, UTC

    def to_dict(self) -> dict[str, Any]:
        """Structured record for JSON consumers. Absent optional values are omitted."""
        weather: dict[str, Any] = {
            "temperature": self.weather.temperature,
            "feelsLike": self.weather.feels_like,
            "humidity": self.weather.humidity,
            "windSpeed": self.weather.wind_speed,
            "windDirection": self.weather.wind_direction,
        }
        if self.weather.wind_gust is not None:
            weather["windGust"] = self.weather.wind_gust
        weather.update(
            {
                "conditions": self.weather.conditions,
                "description": self.weather.description,
                "visibility": self.weather.visibility,
                "pressure": self.weather.pressure,
                "cloudCover": self.weather.cloud_cover,
            }
        )

        safety: dict[str, Any] = {
            "swimmingConditions": self.safety.verdict.label,
            "verdict": self.safety.verdict.value,
            "recommendations": list(self.safety.recommendations),
        }
        if self.safety.uv_advisory is not None:
            safety["uvWarning"] = self.safety.uv_advisory

        return {
            "beach": self.location.display_name,
            "coordinates": {
                "latitude": self.location.latitude,
                "longitude": self.location.longitude,
            },
            "weather": weather,
            "safety": safety,
            "timestamp": self.generated_at,
        }
