"""Plain-text rendering of a weather snapshot."""
from __future__ import annotations

from typing import List

from .models import WeatherSnapshot

FORECAST_HEADER = "7-Day Forecast:"


def format_temperature(value: float) -> str:
    return f"{value:.1f}°F"


def render_report(snapshot: WeatherSnapshot) -> List[str]:
    """Return report lines: current conditions, the forecast header, then one line per day.

    daily[0] duplicates current conditions, so numbering starts at index 1.
    """
    lines = [
        f"Current Weather: {format_temperature(snapshot.current.temp)}, {snapshot.current.description}",
        FORECAST_HEADER,
    ]
    for i, day in enumerate(snapshot.daily):
        if i == 0:
            continue
        lines.append(f"Day {i}: {format_temperature(day.day_temp)}, {day.description}")
    return lines
