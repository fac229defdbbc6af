"""Search state machine for interactive front-ends.

A search moves Idle -> Loading -> Success | Error. Every call to ``begin``
starts a new generation; a result is applied only while its generation is
still the latest, so a slow response can never overwrite a newer search.
"""

import logging
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from weather_wizard.config import EMPTY_INPUT_MESSAGE, GATEWAY_FAILURE_MESSAGE
from weather_wizard.weather.errors import AggregationDomainError, EmptyInputError, GatewayError
from weather_wizard.weather.models import WeatherReport
from weather_wizard.weather.service import WeatherService, validate_city

logger = logging.getLogger(__name__)


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"
    generation: int = 0


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"
    generation: int
    city: str


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    generation: int
    report: WeatherReport


class Error(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    generation: int
    message: str


SearchState = Union[Idle, Loading, Success, Error]


class WeatherSearch:
    """Tracks the state of the most recent city search."""

    def __init__(self, service: WeatherService):
        """Initialize the search.

        Args:
            service: Weather service used to run lookups
        """
        self.service = service
        self._generation = 0
        self._state: SearchState = Idle()

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def begin(self, city: str) -> int:
        """Start a new search generation.

        Blank input moves straight to Error without contacting the API.

        Args:
            city: City name as typed by the user

        Returns:
            Generation number of the new search
        """
        self._generation += 1
        generation = self._generation

        try:
            normalized = validate_city(city)
        except EmptyInputError:
            logger.info(f"Search #{generation} rejected: blank city")
            self._state = Error(generation=generation, message=EMPTY_INPUT_MESSAGE)
            return generation

        logger.info(f"Search #{generation} started for '{normalized}'")
        self._state = Loading(generation=generation, city=normalized)
        return generation

    async def search(self, city: str) -> SearchState:
        """Run a search and apply its outcome if it is still the latest.

        Args:
            city: City name as typed by the user

        Returns:
            The current state after the search completes
        """
        generation = self.begin(city)
        state = self._state
        if not isinstance(state, Loading):
            return state

        try:
            report = await self.service.get_report(state.city)
            outcome: SearchState = Success(generation=generation, report=report)
        except (GatewayError, AggregationDomainError) as e:
            logger.warning(f"Search #{generation} for '{state.city}' failed: {e}")
            outcome = Error(generation=generation, message=GATEWAY_FAILURE_MESSAGE)

        return self._apply(outcome)

    def _apply(self, outcome: SearchState) -> SearchState:
        if outcome.generation != self._generation:
            logger.info(
                f"Discarding result of search #{outcome.generation}, "
                f"superseded by #{self._generation}"
            )
            return self._state

        self._state = outcome
        return outcome
