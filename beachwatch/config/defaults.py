"""Default NYC public beach configurations with fixed coordinates."""

from beachwatch.config.schema import BeachConfig

DEFAULT_BEACHES: list[BeachConfig] = [
    BeachConfig(
        key="coney island",
        name="Coney Island Beach",
        borough="Brooklyn",
        latitude=40.5755,
        longitude=-73.9707,
    ),
    BeachConfig(
        key="brighton beach",
        name="Brighton Beach",
        borough="Brooklyn",
        latitude=40.5776,
        longitude=-73.9614,
    ),
    BeachConfig(
        key="manhattan beach",
        name="Manhattan Beach",
        borough="Brooklyn",
        latitude=40.5888,
        longitude=-73.9378,
    ),
    BeachConfig(
        key="rockaway beach",
        name="Rockaway Beach",
        borough="Queens",
        latitude=40.5892,
        longitude=-73.8131,
    ),
    BeachConfig(
        key="orchard beach",
        name="Orchard Beach",
        borough="Bronx",
        latitude=40.8670,
        longitude=-73.7854,
    ),
    BeachConfig(
        key="south beach",
        name="South Beach",
        borough="Staten Island",
        latitude=40.5886,
        longitude=-74.0776,
    ),
    BeachConfig(
        key="midland beach",
        name="Midland Beach",
        borough="Staten Island",
        latitude=40.5653,
        longitude=-74.0845,
    ),
    BeachConfig(
        key="cedar grove beach",
        name="Cedar Grove Beach",
        borough="Staten Island",
        latitude=40.5434,
        longitude=-74.1045,
    ),
    BeachConfig(
        key="wolfes pond beach",
        name="Wolfe's Pond Beach",
        borough="Staten Island",
        latitude=40.5234,
        longitude=-74.1987,
    ),
]
