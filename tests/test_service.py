import asyncio

import pytest

from weather_wizard.weather.errors import AggregationDomainError, EmptyInputError, GatewayError
from weather_wizard.weather.models import ForecastResponse, TimeFormat
from weather_wizard.weather.service import WeatherService, build_report, validate_city

from tests.helpers import MACAU_OFFSET, forecast_payload, make_current, make_point


@pytest.mark.parametrize("city", ["", "   ", None, "\t\n"])
def test_validate_city_rejects_blank(city):
    with pytest.raises(EmptyInputError):
        validate_city(city)


def test_validate_city_strips():
    assert validate_city("  Macau ") == "Macau"


@pytest.mark.parametrize("city", ["", "   "])
def test_blank_city_issues_no_request(make_client, calls, city):
    async def run():
        async with WeatherService(client=make_client()) as service:
            await service.get_report(city)

    with pytest.raises(EmptyInputError):
        asyncio.run(run())
    assert calls == []


def test_get_report(make_client, calls):
    async def run():
        async with WeatherService(client=make_client(), time_format=TimeFormat()) as service:
            return await service.get_report(" Macau ")

    report = asyncio.run(run())

    assert [request.url.params["q"] for request in calls] == ["Macau", "Macau"]
    assert report.summary.location == "Macau"
    assert report.summary.avg_temp == 17.0
    assert report.summary.description == "Light rain"
    assert [w.local_time for w in report.summary.rain_windows] == ["14:00", "23:00"]
    assert report.condition_main == "Rain"
    assert report.emoji == "🌧️"
    assert report.feels_like == 22.6
    assert report.wind_speed == 3.6
    assert report.extreme_weather is False
    assert report.alert is None
    assert report.icon_url.endswith("/10d@4x.png")


def test_get_report_fails_when_api_rejects_request(make_client):
    async def run():
        async with WeatherService(client=make_client(status_code=401)) as service:
            await service.get_report("Macau")

    with pytest.raises(GatewayError):
        asyncio.run(run())


def test_get_report_empty_forecast(make_client):
    async def run():
        async with WeatherService(client=make_client(forecast=forecast_payload(temps=[]))) as service:
            await service.get_report("Macau")

    with pytest.raises(AggregationDomainError):
        asyncio.run(run())


def test_build_report_extreme_alert():
    current = make_current(main="Thunderstorm", description="severe thunderstorm")
    forecast = ForecastResponse(
        city_name="Macau",
        timezone_offset_seconds=MACAU_OFFSET,
        points=(make_point(0), make_point(1))
    )

    report = build_report(current, forecast, TimeFormat(), "https://icons.test/{icon}.png")

    assert report.extreme_weather is True
    assert report.alert == "SEVERE THUNDERSTORM"
    assert report.emoji == "⚡"
    assert report.icon_url == "https://icons.test/04d.png"
