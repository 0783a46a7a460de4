"""UV exposure advisory based on time of day and cloud cover."""

from beachwatch.models.observation import Observation

HIGH_UV_ADVISORY = (
    "High UV exposure risk - use SPF 30+ sunscreen and reapply every 2 hours"
)
MODERATE_UV_ADVISORY = "Moderate UV exposure - sunscreen recommended"


def uv_advisory(observation: Observation, hour: int) -> str | None:
    """Return the UV advisory for a local hour, or None outside sun hours."""
    clouds = observation.cloud_cover_pct
    # Peak UV hours with clear skies
    if 10 <= hour <= 16 and clouds < 30 and observation.air_temperature_f > 70:
        return HIGH_UV_ADVISORY
    if 9 <= hour <= 17 and clouds < 70:
        return MODERATE_UV_ADVISORY
    return None
