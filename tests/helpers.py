"""Builders for OpenWeatherMap payloads, domain values and stubbed transports."""

from typing import Any, Callable, Dict, List, Optional

import httpx

from weather_wizard.weather.models import CurrentConditions, ForecastPoint

# 2024-01-01 00:00:00 UTC
BASE_TS = 1704067200
STEP = 3 * 3600
MACAU_OFFSET = 8 * 3600


def make_point(
    index: int,
    temp: float = 20.0,
    main: str = "Clouds",
    description: str = "scattered clouds",
    rain: Optional[float] = None
) -> ForecastPoint:
    return ForecastPoint(
        forecast_at_unix=BASE_TS + index * STEP,
        temperature_c=temp,
        condition_main=main,
        condition_description=description,
        rain_volume_mm_3h=rain
    )


def make_current(
    main: str = "Clouds",
    description: str = "broken clouds",
    temp: float = 21.4
) -> CurrentConditions:
    return CurrentConditions(
        location_name="Macau",
        temperature_c=temp,
        feels_like_c=22.6,
        humidity_pct=78,
        wind_speed_mps=3.6,
        condition_main=main,
        condition_description=description,
        icon_id="04d",
        observed_at_unix=BASE_TS
    )


def current_payload(main: str = "Rain", description: str = "light rain") -> Dict[str, Any]:
    return {
        "coord": {"lon": 113.5461, "lat": 22.2006},
        "weather": [{"id": 500, "main": main, "description": description, "icon": "10d"}],
        "main": {"temp": 21.4, "feels_like": 22.6, "temp_min": 20.9, "temp_max": 22.0, "humidity": 78},
        "wind": {"speed": 3.6, "deg": 90},
        "dt": BASE_TS,
        "timezone": MACAU_OFFSET,
        "name": "Macau",
        "cod": 200,
    }


def forecast_payload(temps: Optional[List[float]] = None, rainy: tuple = (2, 5)) -> Dict[str, Any]:
    temps = temps if temps is not None else [10, 12, 14, 16, 18, 20, 22, 24]
    entries = []
    for index, temp in enumerate(temps):
        entry = {
            "dt": BASE_TS + index * STEP,
            "main": {"temp": temp, "feels_like": temp, "humidity": 70},
            "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
        }
        if index in rainy:
            entry["weather"] = [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}]
            entry["rain"] = {"3h": 2.3}
        entries.append(entry)
    return {
        "cod": "200",
        "cnt": len(entries),
        "list": entries,
        "city": {"id": 1821274, "name": "Macau", "timezone": MACAU_OFFSET},
    }


def openweather_handler(
    current: Optional[Dict[str, Any]] = None,
    forecast: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
    calls: Optional[List[httpx.Request]] = None
) -> Callable[[httpx.Request], httpx.Response]:
    """Build a MockTransport handler answering both endpoints."""
    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if status_code != 200:
            return httpx.Response(status_code, json={"cod": str(status_code), "message": "city not found"})
        if request.url.path.endswith("/weather"):
            return httpx.Response(200, json=current if current is not None else current_payload())
        if request.url.path.endswith("/forecast"):
            return httpx.Response(200, json=forecast if forecast is not None else forecast_payload())
        return httpx.Response(404, json={"message": "unknown endpoint"})

    return handler


