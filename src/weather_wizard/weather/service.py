"""Weather service combining the API client with forecast aggregation."""

import logging
from typing import Optional

from weather_wizard.config import HOUR_CYCLE, OPENWEATHER_ICON_URL
from weather_wizard.weather.aggregator import aggregate, is_extreme_weather, weather_emoji
from weather_wizard.weather.client import OpenWeatherClient
from weather_wizard.weather.errors import AggregationDomainError, EmptyInputError, GatewayError
from weather_wizard.weather.models import (
    CurrentConditions, ForecastResponse, TimeFormat, WeatherReport
)

logger = logging.getLogger(__name__)


def validate_city(city: Optional[str]) -> str:
    """Normalize a city query.

    Args:
        city: Raw user input

    Returns:
        City name without surrounding whitespace

    Raises:
        EmptyInputError: If the input is missing or blank
    """
    normalized = (city or "").strip()
    if not normalized:
        raise EmptyInputError("City name must not be blank")
    return normalized


def build_report(
    current: CurrentConditions,
    forecast: ForecastResponse,
    time_format: TimeFormat,
    icon_url_template: str = OPENWEATHER_ICON_URL
) -> WeatherReport:
    """Aggregate a pair of API responses into a renderable report.

    Args:
        current: Current conditions
        forecast: Forecast points and timezone offset
        time_format: Hour cycle used for time strings
        icon_url_template: Icon URL with an ``{icon}`` placeholder

    Returns:
        WeatherReport for the results card

    Raises:
        AggregationDomainError: If the forecast has no points
    """
    summary = aggregate(
        current,
        forecast.points,
        forecast.timezone_offset_seconds,
        time_format
    )
    extreme = is_extreme_weather(current)

    return WeatherReport(
        summary=summary,
        condition_main=current.condition_main,
        feels_like=current.feels_like_c,
        wind_speed=current.wind_speed_mps,
        extreme_weather=extreme,
        alert=current.condition_description.upper() if extreme else None,
        emoji=weather_emoji(current.condition_main),
        icon_url=icon_url_template.format(icon=summary.icon)
    )


class WeatherService:
    """Service fetching both weather responses and summarizing them."""

    def __init__(
        self,
        client: Optional[OpenWeatherClient] = None,
        time_format: Optional[TimeFormat] = None
    ):
        """Initialize the weather service.

        Args:
            client: Weather client instance (creates default if None)
            time_format: Time formatting options (uses HOUR_CYCLE if None)
        """
        self.client = client or OpenWeatherClient()
        self.time_format = time_format or TimeFormat(hour_cycle=HOUR_CYCLE)

    async def get_report(self, city: Optional[str]) -> WeatherReport:
        """Get current weather and forecast summary for a city.

        Both API calls must succeed before anything is aggregated.

        Args:
            city: City name as typed by the user

        Returns:
            WeatherReport for the city

        Raises:
            EmptyInputError: If the city is blank; no request is issued
            GatewayError: If either API request fails
            AggregationDomainError: If the forecast has no points
        """
        city = validate_city(city)

        try:
            current = await self.client.get_current_weather(city)
            forecast = await self.client.get_forecast(city)
        except GatewayError as e:
            logger.error(f"Weather lookup failed for '{city}': {e}")
            raise

        try:
            report = build_report(current, forecast, self.time_format)
        except AggregationDomainError as e:
            logger.error(f"Cannot summarize forecast for '{city}': {e}")
            raise

        logger.info(
            f"Built report for {report.summary.location}: "
            f"{len(forecast.points)} points, will_rain={report.summary.will_rain}, "
            f"extreme={report.extreme_weather}"
        )
        return report

    async def aclose(self):
        """Close the weather client."""
        if self.client:
            try:
                await self.client.aclose()
            except Exception as e:
                logger.error(f"Error closing weather client: {e}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
