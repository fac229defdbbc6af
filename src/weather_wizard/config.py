"""Configuration settings for the weather wizard service."""

import os
from typing import Final, Tuple
from dotenv import load_dotenv

load_dotenv()

HOUR_CYCLES: Final[Tuple[str, ...]] = ("h23", "h12")


def parse_hour_cycle(value: str) -> str:
    """Validate the HOUR_CYCLE setting, failing at import instead of per request."""
    hour_cycle = value.strip().lower()
    if hour_cycle not in HOUR_CYCLES:
        raise ValueError(f"HOUR_CYCLE must be one of {HOUR_CYCLES}, got '{value}'")
    return hour_cycle


# API Configuration
OPENWEATHER_API_KEY: str = os.getenv("OPENWEATHER_API_KEY", "")
OPENWEATHER_BASE_URL: str = os.getenv("OPENWEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5")
OPENWEATHER_ICON_URL: str = os.getenv("OPENWEATHER_ICON_URL", "https://openweathermap.org/img/wn/{icon}@4x.png")
USER_AGENT: Final[str] = "WeatherWizard/0.1 (user@example.com)"

# Forecast request settings
FORECAST_POINTS: int = int(os.getenv("FORECAST_POINTS", "8"))  # 8 x 3h = next 24 hours
UNITS: str = os.getenv("UNITS", "metric")
HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "10"))

# Time display: "h23" (14:05) or "h12" (02:05 PM)
HOUR_CYCLE: str = parse_hour_cycle(os.getenv("HOUR_CYCLE", "h23"))

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# User-facing messages
EMPTY_INPUT_MESSAGE: Final[str] = "Please enter a city 🌍"
GATEWAY_FAILURE_MESSAGE: Final[str] = "City not found! Try again 🧐"
