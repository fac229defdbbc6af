import asyncio

import pytest

from weather_wizard.cli import main, run_once, run_prompt
from weather_wizard.config import EMPTY_INPUT_MESSAGE, GATEWAY_FAILURE_MESSAGE
from weather_wizard.weather.search import WeatherSearch
from weather_wizard.weather.service import WeatherService


def run_with_client(make_client, coro_factory, **kwargs):
    async def run():
        async with WeatherService(client=make_client(**kwargs)) as service:
            return await coro_factory(WeatherSearch(service))

    return asyncio.run(run())


def test_run_once_prints_card(make_client, capsys):
    code = run_with_client(make_client, lambda search: run_once(search, "Macau"))

    out = capsys.readouterr().out
    assert code == 0
    assert "Macau 🌧️" in out
    assert "🌧️ Expected Rain Times:" in out


def test_run_once_unknown_city(make_client, capsys):
    code = run_with_client(make_client, lambda search: run_once(search, "Atlantis"), status_code=404)

    assert code == 1
    assert GATEWAY_FAILURE_MESSAGE in capsys.readouterr().out


def test_prompt_loop(make_client, calls, capsys, monkeypatch):
    answers = iter(["   ", "Macau", "exit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    run_with_client(make_client, run_prompt)

    out = capsys.readouterr().out
    assert EMPTY_INPUT_MESSAGE in out
    assert "Macau 🌧️" in out
    assert out.rstrip().endswith("Bye!")
    assert len(calls) == 2


def test_prompt_loop_stops_on_eof(make_client, capsys, monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)

    run_with_client(make_client, run_prompt)

    assert "Bye!" in capsys.readouterr().out


def test_main_exits_cleanly_on_ctrl_c(capsys, monkeypatch):
    def interrupted_run(coro):
        coro.close()
        raise KeyboardInterrupt

    monkeypatch.setattr("weather_wizard.cli.configure_logging", lambda level: None)
    monkeypatch.setattr("weather_wizard.cli.asyncio.run", interrupted_run)

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 130
    assert "Bye!" in capsys.readouterr().out
