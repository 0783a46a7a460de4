"""Read-only HTTP API serving beach lists and live safety reports."""

from collections.abc import Callable

from fastapi import Depends, FastAPI, HTTPException

from beachwatch.config.loader import load_config
from beachwatch.config.schema import BeachwatchConfig
from beachwatch.errors import MalformedPayloadError, NotFoundError, UpstreamUnavailableError
from beachwatch.locate.resolver import resolve
from beachwatch.locate.table import table_from_config
from beachwatch.pipeline.report_pipeline import BeachReportPipeline

CONFIG_PATH = "configs/default.yaml"

PipelineFactory = Callable[[], BeachReportPipeline]

app = FastAPI(title="Beachwatch", version="0.1.0")


def get_config() -> BeachwatchConfig:
    return load_config(CONFIG_PATH)


def get_pipeline_factory(
    config: BeachwatchConfig = Depends(get_config),
) -> PipelineFactory:
    # Deferred so unknown beaches are rejected before a provider key is needed
    return lambda: BeachReportPipeline.from_config(config)


@app.get("/api/beaches")
def list_beaches(config: BeachwatchConfig = Depends(get_config)):
    """All supported beaches with coordinates."""
    return [
        {
            "key": entry.key,
            "name": entry.display_name,
            "borough": entry.borough,
            "latitude": entry.latitude,
            "longitude": entry.longitude,
        }
        for entry in table_from_config(config).values()
    ]


@app.get("/api/beaches/{name}/conditions")
def beach_conditions(
    name: str,
    config: BeachwatchConfig = Depends(get_config),
    make_pipeline: PipelineFactory = Depends(get_pipeline_factory),
):
    """Current weather and swimming safety for one beach."""
    try:
        resolve(name, table_from_config(config))
    except NotFoundError as e:
        raise HTTPException(
            status_code=404,
            detail={"message": str(e), "valid_keys": e.valid_keys},
        ) from e

    try:
        report = make_pipeline().run(name)
    except (MalformedPayloadError, UpstreamUnavailableError) as e:
        raise HTTPException(status_code=502, detail=str(e)) from e
    return report.to_dict()
