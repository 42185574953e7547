"""
OpenWeatherMap clients for geocoding and One Call weather data.
Provides the `weather <city> <region>` command-line lookup.
"""

__all__ = [
    'WeatherClient', 'GeocodingClient', 'WeatherSettings',
    'GeocodeResult', 'WeatherSnapshot', 'CurrentConditions', 'DailyForecast',
    'WeatherError', 'ConfigError', 'LocationNotFoundError', 'WeatherFetchError', 'WeatherDecodeError',
    'render_report',
]

from .client import WeatherClient
from .config import WeatherSettings
from .errors import ConfigError, LocationNotFoundError, WeatherDecodeError, WeatherError, WeatherFetchError
from .geocoding import GeocodingClient
from .models import CurrentConditions, DailyForecast, GeocodeResult, WeatherSnapshot
from .report import render_report
