from __future__ import annotations
import httpx

from .client import OpenWeatherHttpClient
from .errors import LocationNotFoundError
from .models import GeocodeResult

# plain HTTP
GEOCODING_URL = "http://api.openweathermap.org/geo/1.0/direct"


class GeocodingClient(OpenWeatherHttpClient):
    """Resolves a free-text "city,region" query into coordinates and a display label."""

    def get_coordinates(self, city: str, region: str) -> GeocodeResult:
        """Return the first candidate for ``city,region``.

        Status is checked before the body is decoded; an empty candidate list
        and any non-200 status both raise LocationNotFoundError.

        httpx percent-encodes the query, so the comma in ``q`` is sent as
        ``%2C``; the server decodes it to the same ``city,region`` query.
        """
        params = {
            'q': f"{city},{region}",
            'limit': 1,
        }
        resp = self._get(GEOCODING_URL, params)
        if resp.status_code != httpx.codes.OK:
            raise LocationNotFoundError(f"unable to fetch coordinates for city {city}")
        candidates = GeocodeResult.list_from_json(self._json(resp, 'geocoding'))
        if not candidates:
            raise LocationNotFoundError(f"city {city} not found")
        self._log.debug("Resolved %s,%s to %s (%s candidates)", city, region, candidates[0].label, len(candidates))
        return candidates[0]
