"""HTTP client for the OpenWeatherMap API."""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from weather_wizard.config import (
    OPENWEATHER_API_KEY, OPENWEATHER_BASE_URL, USER_AGENT,
    FORECAST_POINTS, UNITS, HTTP_TIMEOUT
)
from weather_wizard.weather.errors import GatewayError
from weather_wizard.weather.models import (
    CurrentConditions, ForecastResponse,
    OwmCurrentResponse, OwmForecastResponse
)

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """Async client for current conditions and forecasts from OpenWeatherMap."""

    def __init__(
        self,
        api_key: str = OPENWEATHER_API_KEY,
        base_url: str = OPENWEATHER_BASE_URL,
        forecast_points: int = FORECAST_POINTS,
        units: str = UNITS,
        timeout: float = HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize the weather client.

        Args:
            api_key: OpenWeatherMap API key
            base_url: Base URL of the data API, without trailing slash
            forecast_points: Number of 3-hour forecast points to request
            units: Unit system passed to the API
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used to stub the network
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.forecast_points = forecast_points
        self.units = units
        self.client = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=timeout,
            transport=transport
        )

    async def get_current_weather(self, city: str) -> CurrentConditions:
        """Fetch current conditions for a city.

        Args:
            city: City name as typed by the user

        Returns:
            Current conditions

        Raises:
            GatewayError: If the request fails or the response is malformed
        """
        data = await self._get_json("weather", {"q": city})
        try:
            return OwmCurrentResponse.model_validate(data).to_current_conditions()
        except ValidationError as e:
            logger.error(f"Invalid current weather response for '{city}': {e}")
            raise GatewayError("Invalid current weather response format") from e

    async def get_forecast(self, city: str) -> ForecastResponse:
        """Fetch the short-range forecast for a city.

        Args:
            city: City name as typed by the user

        Returns:
            Forecast points with the location's timezone offset

        Raises:
            GatewayError: If the request fails or the response is malformed
        """
        data = await self._get_json("forecast", {"q": city, "cnt": self.forecast_points})
        try:
            forecast = OwmForecastResponse.model_validate(data).to_forecast_response()
        except ValidationError as e:
            logger.error(f"Invalid forecast response for '{city}': {e}")
            raise GatewayError("Invalid forecast response format") from e

        logger.info(f"Successfully fetched forecast with {len(forecast.points)} points for '{city}'")
        return forecast

    async def _get_json(self, endpoint: str, params: Dict[str, Any]) -> Any:
        """Issue a GET request against the API and decode the JSON body."""
        if not self.api_key:
            logger.error("OPENWEATHER_API_KEY is not configured")
            raise GatewayError("OPENWEATHER_API_KEY missing")

        url = f"{self.base_url}/{endpoint}"
        query = {**params, "appid": self.api_key, "units": self.units}

        logger.info(f"Fetching {endpoint} for {params}")

        try:
            response = await self.client.get(url, params=query)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from OpenWeatherMap: {e.response.status_code} - {e.response.text}")
            raise GatewayError(f"OpenWeatherMap returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Request error to OpenWeatherMap: {e}")
            raise GatewayError("OpenWeatherMap is unreachable") from e
        except ValueError as e:
            logger.error(f"Undecodable response from OpenWeatherMap: {e}")
            raise GatewayError("OpenWeatherMap returned invalid JSON") from e

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
