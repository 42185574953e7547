import httpx
import pytest

from weatherclient.config import WeatherSettings
from weatherclient.errors import LocationNotFoundError, WeatherDecodeError
from weatherclient.geocoding import GEOCODING_URL, GeocodingClient
from weatherclient.models import GeocodeResult

from doubles import AUSTIN, PARIS, DummyHttpClient, DummyResp


def make_client(resp):
    c = GeocodingClient(WeatherSettings(api_key='k'))
    c._client = DummyHttpClient({GEOCODING_URL: resp})  # type: ignore
    return c


def test_label_uses_country_without_state():
    c = make_client(DummyResp(200, PARIS))
    place = c.get_coordinates('Paris', 'FR')
    assert place.label == 'Paris, FR'
    assert (place.lat, place.lon) == (48.85, 2.35)


def test_label_prefers_state():
    c = make_client(DummyResp(200, AUSTIN))
    place = c.get_coordinates('Austin', 'Texas')
    assert place.label == 'Austin, Texas'
    assert (place.lat, place.lon) == (30.27, -97.74)


def test_empty_state_falls_back_to_country():
    place = GeocodeResult.from_json({"name": "Springfield", "lat": 1, "lon": 2, "state": "", "country": "US"})
    assert place.label == 'Springfield, US'


def test_request_parameters():
    c = make_client(DummyResp(200, PARIS))
    c.get_coordinates('Paris', 'FR')
    url, params = c._client.calls[0]
    assert url == 'http://api.openweathermap.org/geo/1.0/direct'
    assert params == {'q': 'Paris,FR', 'limit': 1, 'appid': 'k'}
    assert list(params) == ['q', 'limit', 'appid']


def test_only_first_candidate_is_used():
    candidates = PARIS + [{"name": "Paris", "lat": 33.66, "lon": -95.55, "state": "Texas", "country": "US"}]
    place = make_client(DummyResp(200, candidates)).get_coordinates('Paris', 'FR')
    assert place.label == 'Paris, FR'


def test_non_200_fails_before_decoding():
    resp = DummyResp(404, {"cod": "404"})
    c = make_client(resp)
    with pytest.raises(LocationNotFoundError, match='unable to fetch coordinates for city Paris'):
        c.get_coordinates('Paris', 'FR')
    assert resp.json_calls == 0


def test_empty_result_is_city_not_found():
    c = make_client(DummyResp(200, []))
    with pytest.raises(LocationNotFoundError, match='city Atlantis not found'):
        c.get_coordinates('Atlantis', 'XX')


def test_malformed_json_is_decode_error():
    c = make_client(DummyResp(200, ValueError('Expecting value'), text='<html>'))
    with pytest.raises(WeatherDecodeError, match='Expecting value'):
        c.get_coordinates('Paris', 'FR')


def test_wrong_shape_is_decode_error():
    c = make_client(DummyResp(200, {"name": "Paris"}))
    with pytest.raises(WeatherDecodeError):
        c.get_coordinates('Paris', 'FR')


def test_transport_error_propagates():
    c = make_client(httpx.ConnectError('connection refused'))
    with pytest.raises(httpx.ConnectError):
        c.get_coordinates('Paris', 'FR')
