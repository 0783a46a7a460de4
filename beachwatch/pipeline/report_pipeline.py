"""Report pipeline: resolve -> fetch -> normalize -> classify -> assemble."""

import logging
from collections.abc import Callable
from datetime import datetime
from zoneinfo import ZoneInfo

from beachwatch.config.schema import BeachwatchConfig
from beachwatch.ingest.normalizer import normalize
from beachwatch.ingest.openweather_client import OpenWeatherClient
from beachwatch.locate.resolver import resolve
from beachwatch.locate.table import DEFAULT_LOCATIONS, table_from_config
from beachwatch.models.common import utc_now
from beachwatch.models.location import LocationTable
from beachwatch.models.report import BeachReport
from beachwatch.safety.classifier import classify

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "America/New_York"


class BeachReportPipeline:
    def __init__(
        self,
        client: OpenWeatherClient,
        table: LocationTable = DEFAULT_LOCATIONS,
        timezone: str = DEFAULT_TIMEZONE,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.client = client
        self.table = table
        self.tz = ZoneInfo(timezone)
        self.clock = clock

    @classmethod
    def from_config(
        cls,
        config: BeachwatchConfig,
        client: OpenWeatherClient | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> "BeachReportPipeline":
        if client is None:
            p = config.provider
            client = OpenWeatherClient(
                base_url=p.base_url,
                units=p.units.value,
                timeout=p.timeout,
                max_retries=p.max_retries,
                retry_base_delay=p.retry_base_delay,
                api_key_env=p.api_key_env,
            )
        return cls(
            client,
            table=table_from_config(config),
            timezone=config.ops.timezone,
            clock=clock,
        )

    def run(self, beach_name: str) -> BeachReport:
        """Build a report for one beach. Errors from every stage propagate."""
        location = resolve(beach_name, self.table)
        raw = self.client.get_current(location.latitude, location.longitude)

        now = self.clock()
        local_hour = now.astimezone(self.tz).hour
        observation = normalize(raw, local_hour)
        assessment = classify(observation, local_hour)

        logger.info(
            "%s: %s (%d advisories, rules: %s)",
            location.display_name,
            assessment.verdict,
            len(assessment.recommendations),
            ", ".join(assessment.triggered_rules) or "none",
        )
        return BeachReport(
            location=location,
            weather=observation.to_snapshot(),
            safety=assessment,
            generated_at=now.isoformat(),
        )
