"""Command-line weather lookup.

Usage (example):
    weather Austin Texas
    weather Paris FR --env-file ~/.config/openweather.env

Geocodes the location, then prints current conditions and the 7-day forecast.
Every failure prints one diagnostic line and exits with status 1.
"""
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

import httpx

from .client import WeatherClient
from .config import DEFAULT_ENV_FILE, WeatherSettings
from .errors import ConfigError, WeatherDecodeError, WeatherError, WeatherFetchError
from .geocoding import GeocodingClient
from .report import render_report

logger = logging.getLogger("weatherclient.cli")


class WeatherArgumentParser(argparse.ArgumentParser):
    """Usage errors print one line and exit 1 like every other failure."""

    def error(self, message):
        print(f"{self.prog}: error: {message}")
        raise SystemExit(1)


def configure_logging(level: int) -> None:
    logging.basicConfig()
    logging.getLogger().setLevel(level)
    # httpx logs full request URLs at INFO, and those carry the appid key
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = WeatherArgumentParser(prog="weather", description="Current weather and 7-day forecast for a city.")
    # kept as a loose list so a missing region gets our own message and exit code
    parser.add_argument("location", nargs="*", help="City name followed by state or country")
    parser.add_argument("--env-file", default=DEFAULT_ENV_FILE, help="Path to the .env file holding OPENWEATHER_API_KEY")
    return parser


def lookup(settings: WeatherSettings, city: str, region: str) -> int:
    with GeocodingClient(settings) as geocoder:
        try:
            place = geocoder.get_coordinates(city, region)
        except (WeatherError, httpx.HTTPError) as e:
            print(f"Error fetching coordinates: {e}")
            return 1

    print(f"Fetching weather for: {place.label}")

    with WeatherClient(settings) as weather:
        try:
            snapshot = weather.get_weather(place.lat, place.lon)
        except (httpx.HTTPError, WeatherFetchError) as e:
            print(f"Error: {e}")
            return 1
        except WeatherDecodeError as e:
            print(f"Error decoding JSON: {e}")
            return 1

    for line in render_report(snapshot):
        print(line)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        WeatherSettings.load_env_file(args.env_file)
        configure_logging(WeatherSettings.log_level())
        settings = WeatherSettings.from_env()
    except ConfigError as e:
        print(e)
        return 1

    if len(args.location) < 2:
        print("Please provide a city name and state/country")
        return 1
    city, region = args.location[0], args.location[1]
    logger.info("Looking up weather for %s,%s", city, region)
    return lookup(settings, city, region)


if __name__ == "__main__":
    raise SystemExit(main())
