"""Plain-text rendering of the weather results card."""

import math
from typing import List, Sequence

from weather_wizard.weather.models import RainWindow, WeatherReport
from weather_wizard.weather.search import Error, Idle, Loading, SearchState, Success

RAIN_GRID_COLUMNS = 3
NO_RAIN_MESSAGE = "☀️ No rain expected today!"
RAIN_HEADER = "🌧️ Expected Rain Times:"


def round_half_up(value: float) -> int:
    """Round like a display would, 0.5 always goes up."""
    return math.floor(value + 0.5)


def format_rain_window(window: RainWindow) -> str:
    if window.intensity_mm > 0:
        return f"{window.local_time} 💧 {window.intensity_mm:.1f}mm"
    return f"{window.local_time} 🌧️"


def render_rain_grid(windows: Sequence[RainWindow], columns: int = RAIN_GRID_COLUMNS) -> List[str]:
    """Lay rain windows out in rows of ``columns`` cells, keeping their order."""
    cells = [format_rain_window(window) for window in windows]
    return [
        " | ".join(cells[start:start + columns])
        for start in range(0, len(cells), columns)
    ]


def render_report(report: WeatherReport) -> str:
    """Render the results card.

    Args:
        report: Report to render

    Returns:
        Multi-line card text
    """
    summary = report.summary
    lines = [
        f"{summary.location} {report.emoji}",
        f"Local time: {summary.current_local_time}",
        f"{round_half_up(summary.current_temp)}°C",
        f"H: {round_half_up(summary.max_temp)}° L: {round_half_up(summary.min_temp)}°",
        summary.description,
        "",
        f"🌡️ Feels Like: {round_half_up(report.feels_like)}°C",
        f"💧 Humidity: {summary.humidity}%",
        f"🌬️ Wind: {report.wind_speed:g} m/s",
        f"📊 Avg Temp: {round_half_up(summary.avg_temp)}°C",
    ]

    if report.extreme_weather and report.alert:
        lines.extend(["", f"⚠️ Warning: {report.alert}!"])

    lines.append("")
    if summary.will_rain:
        lines.append(RAIN_HEADER)
        lines.extend(render_rain_grid(summary.rain_windows))
    else:
        lines.append(NO_RAIN_MESSAGE)

    return "\n".join(lines)


def render_state(state: SearchState) -> str:
    """Render whatever the current search state should show."""
    if isinstance(state, Idle):
        return ""
    if isinstance(state, Loading):
        return f"⏳ Looking up {state.city}..."
    if isinstance(state, Error):
        return state.message
    if isinstance(state, Success):
        return render_report(state.report)
    raise TypeError(f"Unknown search state: {state!r}")
