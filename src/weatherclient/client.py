from __future__ import annotations
from typing import Any, Dict
import logging
import httpx

from .config import WeatherSettings
from .errors import WeatherDecodeError, WeatherFetchError
from .models import WeatherSnapshot

ONECALL_URL = "https://api.openweathermap.org/data/3.0/onecall"
EXPECTED_DAILY_ENTRIES = 8  # today + 7 forecast days


class OpenWeatherHttpClient:
    """Shared plumbing for OpenWeatherMap endpoints: one httpx client, one GET per call, no retries."""

    def __init__(self, settings: WeatherSettings):
        self.settings = settings
        self._client = httpx.Client(timeout=settings.timeout)
        self._log = logging.getLogger(self.__class__.__module__)

    def _get(self, url: str, params: Dict[str, Any]) -> httpx.Response:
        # appid last; only the bare URL is logged
        query = dict(params)
        query['appid'] = self.settings.api_key
        resp = self._client.get(url, params=query)
        self._log.debug("GET %s -> %s", url, resp.status_code)
        return resp

    @staticmethod
    def _json(resp: httpx.Response, what: str) -> Any:
        try:
            return resp.json()
        except ValueError as e:  # JSON decode error
            raise WeatherDecodeError(f"invalid JSON in {what} response: {e}") from e

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class WeatherClient(OpenWeatherHttpClient):
    """Client for the One Call 3.0 endpoint: current conditions plus daily forecast."""

    def get_weather(self, lat: float, lon: float) -> WeatherSnapshot:
        """
        Fetch current conditions and the daily forecast for a coordinate pair.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees

        Returns:
            WeatherSnapshot with daily[0] being today

        The ``exclude`` list is percent-encoded by httpx (commas sent as
        ``%2C``), which the server reads as ``minutely,hourly,alerts``.

        Raises:
            WeatherFetchError: on any non-200 status
            WeatherDecodeError: on malformed or mismatched JSON
            httpx.HTTPError: on transport failures
        """
        params = {
            'lat': f"{lat:f}",
            'lon': f"{lon:f}",
            'exclude': 'minutely,hourly,alerts',
            'units': self.settings.units,
        }
        resp = self._get(ONECALL_URL, params)
        if resp.status_code != httpx.codes.OK:
            raise WeatherFetchError("Unable to fetch weather data!")
        snapshot = WeatherSnapshot.from_json(self._json(resp, 'onecall'))
        if len(snapshot.daily) != EXPECTED_DAILY_ENTRIES:
            self._log.warning("Expected %s daily entries, got %s", EXPECTED_DAILY_ENTRIES, len(snapshot.daily))
        return snapshot
