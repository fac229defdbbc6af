"""API endpoints for the weather wizard service."""

import logging
from typing import AsyncIterator, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from weather_wizard.config import (
    EMPTY_INPUT_MESSAGE, GATEWAY_FAILURE_MESSAGE,
    FORECAST_POINTS, HOUR_CYCLE, UNITS
)
from weather_wizard.weather.errors import AggregationDomainError, EmptyInputError, GatewayError
from weather_wizard.weather.models import WeatherReport
from weather_wizard.weather.service import WeatherService

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/weather", tags=["weather"])


async def get_weather_service() -> AsyncIterator[WeatherService]:
    """Dependency yielding a weather service closed after the request."""
    async with WeatherService() as weather_service:
        yield weather_service


@router.get("/", response_model=WeatherReport)
async def get_weather_report(
    city: Optional[str] = Query(
        None,
        description="City name, e.g. Macau"
    ),
    weather_service: WeatherService = Depends(get_weather_service)
) -> WeatherReport:
    """Get current weather and a forecast summary for a city.

    Args:
        city: City name as typed by the user
        weather_service: Injected weather service

    Returns:
        WeatherReport with temperature statistics and rain windows

    Raises:
        HTTPException: 400 for a blank city, 502 if the lookup fails
    """
    try:
        report = await weather_service.get_report(city)

    except EmptyInputError as e:
        logger.info(f"Rejected weather request: {e}")
        raise HTTPException(status_code=400, detail=EMPTY_INPUT_MESSAGE)

    except (GatewayError, AggregationDomainError) as e:
        logger.error(f"Error getting weather for '{city}': {e}")
        raise HTTPException(status_code=502, detail=GATEWAY_FAILURE_MESSAGE)

    logger.info(f"Successfully built report for {report.summary.location}")
    return report


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status response
    """
    return {"status": "healthy", "service": "weather-wizard"}


@router.get("/info")
async def get_service_info() -> dict:
    """Get service information.

    Returns:
        Service information including forecast settings and features
    """
    return {
        "service": "Weather Wizard",
        "version": "0.1.0",
        "forecast": {
            "points": FORECAST_POINTS,
            "interval_hours": 3,
            "units": UNITS,
            "hour_cycle": HOUR_CYCLE
        },
        "features": [
            "Current conditions by city name",
            "Average, minimum and maximum forecast temperature",
            "Expected rain times with intensity",
            "Extreme weather warnings"
        ],
        "data_source": "OpenWeatherMap API"
    }
