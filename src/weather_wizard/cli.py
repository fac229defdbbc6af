"""
Command-line front-end.

- ``weather-wizard Macau`` prints one results card and exits
- ``weather-wizard`` starts a prompt; type a city, or 'exit' to quit
"""

import asyncio
import sys
from typing import List, Optional

from weather_wizard.logging_config import configure_logging
from weather_wizard.weather.render import render_state
from weather_wizard.weather.search import Error, Loading, WeatherSearch
from weather_wizard.weather.service import WeatherService

EXIT_WORDS = {"exit", "quit"}


async def run_once(search: WeatherSearch, city: str) -> int:
    """Run a single search and print its outcome; returns an exit code."""
    state = await search.search(city)
    print(render_state(state))
    return 1 if isinstance(state, Error) else 0


async def run_prompt(search: WeatherSearch) -> None:
    print("☀️ Weather Wizard 🌈 (type 'exit' to quit)\n")
    while True:
        try:
            raw = await asyncio.to_thread(input, "City: ")
        except EOFError:
            print()
            break

        if raw.strip().lower() in EXIT_WORDS:
            break

        task = asyncio.create_task(search.search(raw))
        await asyncio.sleep(0)
        if isinstance(search.state, Loading):
            print(render_state(search.state))
        state = await task
        print(render_state(state) + "\n")

    print("Bye!")


async def _main(args: List[str]) -> int:
    async with WeatherService() as service:
        search = WeatherSearch(service)
        if args:
            return await run_once(search, " ".join(args))
        await run_prompt(search)
        return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Console script entry point."""
    configure_logging("WARNING")
    args = sys.argv[1:] if argv is None else argv
    try:
        code = asyncio.run(_main(args))
    except KeyboardInterrupt:
        # Ctrl-C cancels the main task while input() waits in a worker thread
        print("\nBye!")
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    main()
