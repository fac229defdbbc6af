"""Data models for the weather wizard service."""

from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CurrentConditions(BaseModel):
    """Current weather conditions for a queried city."""
    model_config = ConfigDict(frozen=True)

    location_name: str = Field(..., description="Resolved location name")
    temperature_c: float = Field(..., description="Temperature in Celsius")
    feels_like_c: float = Field(..., description="Perceived temperature in Celsius")
    humidity_pct: int = Field(..., ge=0, le=100, description="Relative humidity in percent")
    wind_speed_mps: float = Field(..., ge=0, description="Wind speed in meters per second")
    condition_main: str = Field(..., description="Condition group, e.g. Rain or Clouds")
    condition_description: str = Field(..., description="Free-text condition description")
    icon_id: str = Field(..., description="Provider icon identifier")
    observed_at_unix: int = Field(..., description="Observation time, unix seconds UTC")


class ForecastPoint(BaseModel):
    """One timestamped forecast entry."""
    model_config = ConfigDict(frozen=True)

    forecast_at_unix: int = Field(..., description="Forecast time, unix seconds UTC")
    temperature_c: float = Field(..., description="Temperature in Celsius")
    condition_main: str = Field(..., description="Condition group")
    condition_description: str = Field(..., description="Free-text condition description")
    rain_volume_mm_3h: Optional[float] = Field(None, ge=0, description="Rain volume for the last 3 hours in mm")


class ForecastResponse(BaseModel):
    """Forecast points plus the location's UTC offset."""
    model_config = ConfigDict(frozen=True)

    city_name: str = Field(..., description="City name reported by the forecast API")
    timezone_offset_seconds: int = Field(..., description="Shift in seconds from UTC")
    points: Tuple[ForecastPoint, ...] = Field(..., description="Forecast points in API order")


class TimeFormat(BaseModel):
    """Explicit time-of-day formatting options."""
    model_config = ConfigDict(frozen=True)

    hour_cycle: Literal["h23", "h12"] = Field("h23", description="24-hour or 12-hour clock")
    am_marker: str = Field("AM", description="Suffix for morning times on a 12-hour clock")
    pm_marker: str = Field("PM", description="Suffix for afternoon times on a 12-hour clock")


class RainWindow(BaseModel):
    """A forecast point that predicts rain, reduced to local time and intensity."""
    model_config = ConfigDict(frozen=True)

    local_time: str = Field(..., description="Local time of day")
    intensity_mm: float = Field(..., description="Rain volume in mm over 3 hours, 0 if unknown")


class AggregatedSummary(BaseModel):
    """Summary derived from current conditions and the forecast."""
    model_config = ConfigDict(frozen=True)

    location: str
    current_temp: float
    avg_temp: float
    min_temp: float
    max_temp: float
    humidity: int
    description: str
    icon: str
    will_rain: bool
    rain_windows: Tuple[RainWindow, ...]
    current_local_time: str


class WeatherReport(BaseModel):
    """Everything the results card needs to render."""
    model_config = ConfigDict(frozen=True)

    summary: AggregatedSummary = Field(..., description="Aggregated forecast summary")
    condition_main: str = Field(..., description="Current condition group")
    feels_like: float = Field(..., description="Perceived temperature in Celsius")
    wind_speed: float = Field(..., description="Wind speed in meters per second")
    extreme_weather: bool = Field(..., description="Whether an extreme weather warning applies")
    alert: Optional[str] = Field(None, description="Warning text when extreme_weather is set")
    emoji: str = Field(..., description="Emoji for the current condition group")
    icon_url: str = Field(..., description="URL of the provider's condition icon")


class OwmWeatherEntry(BaseModel):
    """Entry of the OpenWeatherMap ``weather`` array."""
    main: str
    description: str = ""
    icon: str = ""


class OwmCurrentMain(BaseModel):
    temp: float
    feels_like: float
    humidity: int


class OwmWind(BaseModel):
    speed: float


class OwmCurrentResponse(BaseModel):
    """Raw response from the OpenWeatherMap current weather endpoint."""
    name: str = Field(..., description="Location name")
    dt: int = Field(..., description="Observation time, unix UTC")
    main: OwmCurrentMain
    weather: List[OwmWeatherEntry] = Field(..., min_length=1)
    wind: OwmWind

    def to_current_conditions(self) -> CurrentConditions:
        """Convert the raw payload into domain values."""
        condition = self.weather[0]
        return CurrentConditions(
            location_name=self.name,
            temperature_c=self.main.temp,
            feels_like_c=self.main.feels_like,
            humidity_pct=self.main.humidity,
            wind_speed_mps=self.wind.speed,
            condition_main=condition.main,
            condition_description=condition.description,
            icon_id=condition.icon,
            observed_at_unix=self.dt
        )


class OwmForecastMain(BaseModel):
    temp: float


class OwmForecastEntry(BaseModel):
    """Entry of the OpenWeatherMap forecast ``list`` array."""
    dt: int
    main: OwmForecastMain
    weather: List[OwmWeatherEntry] = Field(..., min_length=1)
    rain: Optional[Dict[str, float]] = None

    def to_forecast_point(self) -> ForecastPoint:
        condition = self.weather[0]
        return ForecastPoint(
            forecast_at_unix=self.dt,
            temperature_c=self.main.temp,
            condition_main=condition.main,
            condition_description=condition.description,
            rain_volume_mm_3h=(self.rain or {}).get("3h")
        )


class OwmCity(BaseModel):
    name: str = ""
    timezone: int = Field(..., description="Shift in seconds from UTC")


class OwmForecastResponse(BaseModel):
    """Raw response from the OpenWeatherMap 5 day / 3 hour forecast endpoint."""
    list: List[OwmForecastEntry] = Field(..., description="Forecast entries")
    city: OwmCity = Field(..., description="City block carrying the timezone offset")

    def to_forecast_response(self) -> ForecastResponse:
        """Convert the raw payload into domain values, keeping API order."""
        return ForecastResponse(
            city_name=self.city.name,
            timezone_offset_seconds=self.city.timezone,
            points=tuple(entry.to_forecast_point() for entry in self.list)
        )

