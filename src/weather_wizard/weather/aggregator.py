"""Forecast aggregation: pure functions turning API data into a summary.

Nothing in this module performs I/O or keeps state, so every function can be
called from any thread and returns the same value for the same arguments.

Local times are computed by adding the location's UTC offset to a UTC unix
timestamp. This matches the offset the API reports for the query time and
does not follow DST transitions that happen inside the forecast window.
"""

import re
from datetime import datetime, timezone
from typing import Sequence, Tuple

from weather_wizard.weather.errors import AggregationDomainError
from weather_wizard.weather.models import (
    AggregatedSummary, CurrentConditions, ForecastPoint,
    RainWindow, TimeFormat
)

DEFAULT_TIME_FORMAT = TimeFormat()

EXTREME_CONDITION = "Extreme"
EXTREME_KEYWORDS = re.compile(r"typhoon|storm|hurricane|tornado|severe", re.IGNORECASE)

WEATHER_EMOJI = {
    "Rain": "🌧️",
    "Clouds": "☁️",
    "Clear": "☀️",
    "Snow": "❄️",
    "Thunderstorm": "⚡",
    "Extreme": "⚠️",
}
DEFAULT_EMOJI = "🌈"


def local_time_of(
    unix_timestamp: int,
    timezone_offset_seconds: int,
    time_format: TimeFormat = DEFAULT_TIME_FORMAT
) -> str:
    """Format a UTC timestamp as time of day at the given offset.

    Args:
        unix_timestamp: Seconds since epoch, UTC
        timezone_offset_seconds: Location's shift from UTC in seconds
        time_format: Hour cycle and AM/PM markers to use

    Returns:
        Two-digit hour and minute, e.g. "14:05" or "02:05 PM"
    """
    local_instant = datetime.fromtimestamp(unix_timestamp + timezone_offset_seconds, tz=timezone.utc)
    if time_format.hour_cycle == "h12":
        marker = time_format.am_marker if local_instant.hour < 12 else time_format.pm_marker
        return f"{local_instant.strftime('%I:%M')} {marker}"
    return local_instant.strftime("%H:%M")


def is_rain_match(point: ForecastPoint) -> bool:
    """Check whether a forecast point predicts rain by group or description."""
    return (
        "rain" in point.condition_main.lower() or
        "rain" in point.condition_description.lower()
    )


def extract_rain_windows(
    forecast_set: Sequence[ForecastPoint],
    timezone_offset_seconds: int,
    time_format: TimeFormat = DEFAULT_TIME_FORMAT
) -> Tuple[RainWindow, ...]:
    """Reduce rainy forecast points to local times and intensities.

    Args:
        forecast_set: Forecast points in chronological order
        timezone_offset_seconds: Location's shift from UTC in seconds
        time_format: Hour cycle used for the time strings

    Returns:
        Rain windows in the same order as the input points
    """
    return tuple(
        RainWindow(
            local_time=local_time_of(point.forecast_at_unix, timezone_offset_seconds, time_format),
            intensity_mm=point.rain_volume_mm_3h or 0.0
        )
        for point in forecast_set
        if is_rain_match(point)
    )


def capitalize_first(text: str) -> str:
    """Upper-case the first character only, e.g. "light rain" -> "Light rain"."""
    return text[:1].upper() + text[1:]


def is_extreme_weather(current: CurrentConditions) -> bool:
    """Check whether current conditions warrant an extreme weather warning."""
    return (
        current.condition_main == EXTREME_CONDITION or
        EXTREME_KEYWORDS.search(current.condition_description) is not None
    )


def weather_emoji(condition_main: str) -> str:
    return WEATHER_EMOJI.get(condition_main, DEFAULT_EMOJI)


def aggregate(
    current: CurrentConditions,
    forecast_set: Sequence[ForecastPoint],
    timezone_offset_seconds: int,
    time_format: TimeFormat = DEFAULT_TIME_FORMAT
) -> AggregatedSummary:
    """Summarize current conditions and the forecast.

    Args:
        current: Current conditions
        forecast_set: Forecast points in chronological order
        timezone_offset_seconds: Location's shift from UTC in seconds
        time_format: Hour cycle used for time strings

    Returns:
        Aggregated summary

    Raises:
        AggregationDomainError: If the forecast has no points
    """
    if not forecast_set:
        raise AggregationDomainError(f"No forecast points for '{current.location_name}'")

    temperatures = [point.temperature_c for point in forecast_set]

    return AggregatedSummary(
        location=current.location_name,
        current_temp=current.temperature_c,
        avg_temp=sum(temperatures) / len(temperatures),
        min_temp=min(temperatures),
        max_temp=max(temperatures),
        humidity=current.humidity_pct,
        description=capitalize_first(current.condition_description),
        icon=current.icon_id,
        will_rain=any(is_rain_match(point) for point in forecast_set),
        rain_windows=extract_rain_windows(forecast_set, timezone_offset_seconds, time_format),
        current_local_time=local_time_of(current.observed_at_unix, timezone_offset_seconds, time_format)
    )
