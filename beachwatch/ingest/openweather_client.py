"""OpenWeather current-weather API client with retry and rate limit handling."""

import logging
import os
import time

import httpx

from beachwatch.errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org"
DEFAULT_API_KEY_ENV = "OPENWEATHER_API_KEY"
RETRY_STATUSES = (429, 500, 502, 503, 504)


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = OPENWEATHER_BASE_URL,
        units: str = "imperial",
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 2.0,
        api_key_env: str = DEFAULT_API_KEY_ENV,
    ):
        self.api_key = api_key or os.environ.get(api_key_env, "")
        if not self.api_key:
            raise UpstreamUnavailableError(
                f"OpenWeather API key not configured ({api_key_env} is unset)"
            )
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def get_current(self, latitude: float, longitude: float) -> dict:
        """Fetch current conditions at a coordinate.

        Retries on 429/5xx and transport errors with exponential backoff.
        """
        url = f"{self.base_url}/data/2.5/weather"
        params = {
            "lat": latitude,
            "lon": longitude,
            "appid": self.api_key,
            "units": self.units,
        }

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, params=params, timeout=self.timeout)
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "OpenWeather request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                logger.error("OpenWeather request failed: %s", e)
                raise UpstreamUnavailableError(
                    f"OpenWeather request failed: {e}"
                ) from e

            if resp.status_code in RETRY_STATUSES and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "OpenWeather returned %d, retrying in %.1fs (attempt %d/%d)",
                    resp.status_code, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue

            if resp.status_code >= 400:
                logger.error(
                    "OpenWeather API error %d for lat=%s lon=%s",
                    resp.status_code, latitude, longitude,
                )
                raise UpstreamUnavailableError(
                    f"OpenWeather API error: {resp.status_code} {resp.reason_phrase}",
                    status_code=resp.status_code,
                )
            try:
                return resp.json()
            except ValueError as e:
                raise UpstreamUnavailableError(
                    "OpenWeather returned a non-JSON body",
                    status_code=resp.status_code,
                ) from e

        raise UpstreamUnavailableError("OpenWeather retries exhausted")
