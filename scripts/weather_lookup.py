"""
Look up current weather and the 7-day forecast for a city.
Usage: python weather_lookup.py <city> <region>
"""
from weatherclient.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
