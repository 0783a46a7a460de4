"""Output formatters for beach reports."""

import json

from beachwatch.models.report import BeachReport


def format_report_text(r: BeachReport) -> str:
    """Plain text report for terminals and logs."""
    w = r.weather
    lines = [
        f"=== {r.location.display_name} "
        f"({r.location.latitude:.4f}, {r.location.longitude:.4f}) ===",
        f"Swimming: {r.safety.verdict.label}",
        f"Conditions: {w.conditions} ({w.description}), "
        f"{w.temperature}F, feels like {w.feels_like}F",
        f"Wind: {w.wind_speed} mph from {w.wind_direction:g} deg"
        + (f", gusts {w.wind_gust} mph" if w.wind_gust is not None else ""),
        f"Humidity: {w.humidity:g}% | Clouds: {w.cloud_cover:g}% | "
        f"Visibility: {w.visibility:.1f} mi | Pressure: {w.pressure:g} hPa",
    ]
    if r.safety.uv_advisory:
        lines.append(f"UV: {r.safety.uv_advisory}")
    lines.append("Recommendations:")
    lines.extend(f"  - {rec}" for rec in r.safety.recommendations)
    lines.append(f"Generated: {r.generated_at}")
    return "\n".join(lines)


def format_report_json(r: BeachReport) -> str:
    """JSON report for programmatic consumption."""
    return json.dumps(r.to_dict(), indent=2, ensure_ascii=False)


def format_report_chat(r: BeachReport) -> str:
    """Chat-friendly markdown summary."""
    w = r.weather
    lines = [
        f"**{r.location.display_name}**: {r.safety.verdict.label}",
        f"- {w.description.capitalize()}, {w.temperature}F "
        f"(feels like {w.feels_like}F), wind {w.wind_speed} mph",
    ]
    lines.extend(f"- {rec}" for rec in r.safety.recommendations)
    if r.safety.uv_advisory:
        lines.append(f"- {r.safety.uv_advisory}")
    return "\n".join(lines)
