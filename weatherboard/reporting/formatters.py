"""Output formatters for city lists and refresh summaries."""

import json

from weatherboard.models.forecast import CitySummary
from weatherboard.models.reporting import RefreshSummary
from weatherboard.reporting.display import (
    REGION_LABELS,
    condition_label,
    weather_icon,
    weather_icon_class,
)


def city_to_dict(c: CitySummary) -> dict:
    """Display payload for one city, including the icon lookups."""
    return {
        "name": c.name,
        "region": c.region.value,
        "temperature": c.temperature,
        "condition": c.condition.value,
        "condition_label": condition_label(c.condition),
        "icon": weather_icon(c.condition),
        "icon_class": weather_icon_class(c.condition),
        "humidity": c.humidity,
        "wind_speed": c.wind_speed,
        "update_time": c.update_time,
        "rain_probability": c.rain_probability,
        "comfort": c.comfort,
        "min_temp": c.min_temp,
        "max_temp": c.max_temp,
        "forecast_start": c.forecast_start,
        "forecast_end": c.forecast_end,
    }


def format_cities_text(cities: list[CitySummary] | tuple[CitySummary, ...]) -> str:
    """Plain text table, one line per city."""
    if not cities:
        return "(no cities)"
    lines = []
    for c in cities:
        lines.append(
            f"{c.name}\t{REGION_LABELS.get(c.region, c.region)}\t"
            f"{condition_label(c.condition)}\t{c.temperature}°C "
            f"({c.min_temp}-{c.max_temp})\t降雨 {c.rain_probability}%\t"
            f"濕度 {c.humidity}%\t風速 {c.wind_speed} km/h\t{c.comfort}"
        )
    footer = f"更新時間 {cities[0].update_time}"
    if cities[0].forecast_start:
        footer += f" | 預報時段 {cities[0].forecast_start} ~ {cities[0].forecast_end}"
    lines.append(footer)
    return "\n".join(lines)


def format_cities_json(cities: list[CitySummary] | tuple[CitySummary, ...]) -> str:
    return json.dumps([city_to_dict(c) for c in cities], ensure_ascii=False, indent=2)


def format_summary_text(s: RefreshSummary) -> str:
    lines = [
        f"=== Refresh {s.status} | Cycle {s.cycle_id[:8]} ===",
        f"Locations: {s.locations_received} received, "
        f"{s.cities_published} published, {len(s.skipped)} skipped",
    ]
    if s.region_counts:
        lines.append(
            "Regions: "
            + ", ".join(f"{k}={v}" for k, v in sorted(s.region_counts.items()))
        )
    if s.skipped:
        lines.append(f"Skipped: {', '.join(s.skipped)}")
    if s.error:
        lines.append(f"Error: {s.error}")
    lines.append(f"Duration: {s.duration_seconds:.1f}s")
    return "\n".join(lines)
