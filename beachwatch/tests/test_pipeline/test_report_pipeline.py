"""Tests for the report pipeline with a mocked OpenWeather client."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from beachwatch.config.schema import BeachConfig, BeachwatchConfig
from beachwatch.errors import MalformedPayloadError, NotFoundError, UpstreamUnavailableError
from beachwatch.ingest.openweather_client import OpenWeatherClient
from beachwatch.models.safety import Verdict
from beachwatch.pipeline.report_pipeline import BeachReportPipeline
from beachwatch.safety.uv import HIGH_UV_ADVISORY

# 17:00 UTC is 13:00 in New York during daylight saving time
FIXED_NOW = datetime(2026, 7, 15, 17, 0, tzinfo=UTC)


def _client(payload: dict | None = None) -> MagicMock:
    client = MagicMock(spec=OpenWeatherClient)
    client.get_current.return_value = payload
    return client


def _pipeline(client: MagicMock, **kwargs) -> BeachReportPipeline:
    return BeachReportPipeline(client, clock=lambda: FIXED_NOW, **kwargs)


class TestRun:
    def test_clear_day_report(self, clear_payload: dict):
        client = _client(clear_payload)
        report = _pipeline(client).run("Coney Island")

        client.get_current.assert_called_once_with(40.5755, -73.9707)
        assert report.location.display_name == "Coney Island Beach"
        assert report.safety.verdict is Verdict.GOOD
        assert report.safety.uv_advisory == HIGH_UV_ADVISORY
        assert report.weather.temperature == 82
        assert report.weather.visibility == 6.2
        assert report.generated_at == "2026-07-15T17:00:00+00:00"

    def test_thunderstorm_report(self, storm_payload: dict):
        report = _pipeline(_client(storm_payload)).run("rockaway beach")
        assert report.safety.verdict is Verdict.DANGEROUS
        assert len(report.safety.recommendations) == 4
        assert report.safety.uv_advisory is None
        assert report.weather.wind_gust == 29

    def test_local_hour_uses_timezone(self, clear_payload: dict):
        # 17:00 UTC is 17:00 in UTC: moderate window, past the high window
        report = _pipeline(_client(clear_payload), timezone="UTC").run("coney island")
        assert report.safety.uv_advisory is not None
        assert report.safety.uv_advisory != HIGH_UV_ADVISORY

    def test_unknown_beach_never_fetches(self):
        client = _client()
        with pytest.raises(NotFoundError) as exc_info:
            _pipeline(client).run("Atlantis")
        assert len(exc_info.value.valid_keys) == 9
        client.get_current.assert_not_called()

    def test_malformed_payload_propagates(self, clear_payload: dict):
        del clear_payload["main"]["temp"]
        with pytest.raises(MalformedPayloadError) as exc_info:
            _pipeline(_client(clear_payload)).run("coney island")
        assert exc_info.value.field == "temp"

    def test_empty_payload_refused(self):
        with pytest.raises(UpstreamUnavailableError):
            _pipeline(_client(None)).run("coney island")

    def test_upstream_error_propagates(self):
        client = _client()
        client.get_current.side_effect = UpstreamUnavailableError("down", 503)
        with pytest.raises(UpstreamUnavailableError):
            _pipeline(client).run("south beach")


class TestToDict:
    def test_structure(self, clear_payload: dict):
        data = _pipeline(_client(clear_payload)).run("coney island").to_dict()
        assert data["beach"] == "Coney Island Beach"
        assert data["coordinates"] == {"latitude": 40.5755, "longitude": -73.9707}
        assert data["weather"]["windGust"] == 11
        assert data["weather"]["conditions"] == "Clear"
        assert data["safety"]["swimmingConditions"] == "GOOD - Safe for swimming"
        assert data["safety"]["verdict"] == "GOOD"
        assert data["safety"]["uvWarning"] == HIGH_UV_ADVISORY
        assert data["timestamp"] == "2026-07-15T17:00:00+00:00"

    def test_optional_keys_omitted(self, clear_payload: dict):
        del clear_payload["wind"]["gust"]
        clear_payload["clouds"]["all"] = 95
        data = _pipeline(_client(clear_payload)).run("coney island").to_dict()
        assert "windGust" not in data["weather"]
        assert "uvWarning" not in data["safety"]


class TestFromConfig:
    def test_builds_client_from_env(self, monkeypatch: pytest.MonkeyPatch, default_config):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "test-key")
        pipeline = BeachReportPipeline.from_config(default_config)
        assert isinstance(pipeline.client, OpenWeatherClient)
        assert pipeline.client.api_key == "test-key"
        assert len(pipeline.table) == 9

    def test_missing_key(self, monkeypatch: pytest.MonkeyPatch, default_config):
        monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
        with pytest.raises(UpstreamUnavailableError):
            BeachReportPipeline.from_config(default_config)

    def test_custom_beaches(self, clear_payload: dict):
        config = BeachwatchConfig(
            beaches=[
                BeachConfig(key="Jones Beach", name="Jones Beach", latitude=40.6, longitude=-73.5),
            ]
        )
        pipeline = BeachReportPipeline.from_config(
            config, client=_client(clear_payload), clock=lambda: FIXED_NOW
        )
        assert pipeline.run("JONES BEACH").location.display_name == "Jones Beach"
        with pytest.raises(NotFoundError):
            pipeline.run("coney island")
