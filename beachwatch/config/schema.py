"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator, model_validator


class UnitSystem(StrEnum):
    IMPERIAL = "imperial"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def normalize_beach_key(name: str) -> str:
    """Lookup-key form of a beach name: trimmed, lowercase, single-spaced."""
    return " ".join(name.split()).lower()


class BeachConfig(BaseModel):
    model_config = {"extra": "forbid"}

    key: str
    name: str
    borough: str = ""
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    enabled: bool = True

    @field_validator("key")
    @classmethod
    def _normalize_key(cls, v: str) -> str:
        key = normalize_beach_key(v)
        if not key:
            raise ValueError("beach key must not be blank")
        return key


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.openweathermap.org"
    api_key_env: str = "OPENWEATHER_API_KEY"
    units: UnitSystem = UnitSystem.IMPERIAL
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=3, ge=0)
    retry_base_delay: float = Field(default=2.0, ge=0.0)


class OpsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timezone: str = "America/New_York"
    log_level: LogLevel = LogLevel.INFO

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v


class BeachwatchConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    ops: OpsConfig = OpsConfig()
    beaches: list[BeachConfig] = []

    @model_validator(mode="after")
    def _unique_keys(self) -> "BeachwatchConfig":
        seen: set[str] = set()
        for beach in self.beaches:
            if beach.key in seen:
                raise ValueError(f"Duplicate beach key: {beach.key}")
            seen.add(beach.key)
        return self
