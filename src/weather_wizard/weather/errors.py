"""Exceptions raised by the weather wizard service."""


class WeatherError(Exception):
    """Base class for weather lookup failures."""
    pass


class EmptyInputError(WeatherError):
    """Raised when the city query is blank."""
    pass


class GatewayError(WeatherError):
    """Raised when a weather API request fails for any reason."""
    pass


class AggregationDomainError(WeatherError):
    """Raised when the forecast cannot be summarized, e.g. it has no points."""
    pass
