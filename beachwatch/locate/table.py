"""Build the immutable beach location table from configuration."""

from beachwatch.config.defaults import DEFAULT_BEACHES
from beachwatch.config.schema import BeachConfig, BeachwatchConfig
from beachwatch.models.location import LocationEntry, LocationTable


def build_location_table(beaches: list[BeachConfig]) -> LocationTable:
    """Create a LocationTable from enabled beach configs, preserving order."""
    return LocationTable(
        [
            LocationEntry(
                key=b.key,
                display_name=b.name,
                latitude=b.latitude,
                longitude=b.longitude,
                borough=b.borough,
            )
            for b in beaches
            if b.enabled
        ]
    )


def table_from_config(config: BeachwatchConfig) -> LocationTable:
    return build_location_table(config.beaches or DEFAULT_BEACHES)


DEFAULT_LOCATIONS: LocationTable = build_location_table(DEFAULT_BEACHES)
