"""Shared fixtures: stubbed OpenWeatherMap clients."""

from typing import Callable, List

import httpx
import pytest

from weather_wizard.weather.client import OpenWeatherClient

from tests.helpers import openweather_handler


@pytest.fixture
def calls() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(calls) -> Callable[..., OpenWeatherClient]:
    """Factory for clients talking to a stubbed OpenWeatherMap."""
    def factory(**kwargs) -> OpenWeatherClient:
        handler = openweather_handler(calls=calls, **kwargs)
        return OpenWeatherClient(
            api_key="test-key",
            base_url="https://api.test/data/2.5",
            transport=httpx.MockTransport(handler)
        )

    return factory
