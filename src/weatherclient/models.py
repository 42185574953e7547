"""
Typed records mirroring the OpenWeatherMap geocoding and One Call payloads.
Only the fields the CLI renders are kept.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from .errors import WeatherDecodeError


def _first_description(record: Any, where: str) -> str:
    weather = record.get('weather') if isinstance(record, dict) else None
    if not isinstance(weather, list):
        raise WeatherDecodeError(f"{where}: missing 'weather' list")
    if not weather:
        raise WeatherDecodeError(f"{where}: empty 'weather' list")
    first = weather[0]
    if not isinstance(first, dict) or not isinstance(first.get('description'), str):
        raise WeatherDecodeError(f"{where}: weather entry has no description")
    return first['description']


def _number(value: Any, where: str) -> float:
    # bool is an int subclass but never a temperature
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise WeatherDecodeError(f"{where}: expected a number, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class GeocodeResult:
    """One candidate location returned by the direct geocoding endpoint."""
    name: str
    lat: float
    lon: float
    country: str = ''
    state: Optional[str] = None

    @property
    def label(self) -> str:
        """Display label: "<name>, <state>" when a state is known, else "<name>, <country>"."""
        if self.state:
            return f"{self.name}, {self.state}"
        return f"{self.name}, {self.country}"

    @staticmethod
    def from_json(data: Any) -> 'GeocodeResult':
        if not isinstance(data, dict):
            raise WeatherDecodeError(f"geocode candidate: expected an object, got {type(data).__name__}")
        name = data.get('name')
        if not isinstance(name, str):
            raise WeatherDecodeError("geocode candidate: missing 'name'")
        return GeocodeResult(
            name=name,
            lat=_number(data.get('lat'), 'geocode candidate lat'),
            lon=_number(data.get('lon'), 'geocode candidate lon'),
            country=data.get('country') or '',
            state=data.get('state') or None,
        )

    @staticmethod
    def list_from_json(data: Any) -> List['GeocodeResult']:
        if not isinstance(data, list):
            raise WeatherDecodeError(f"geocode response: expected an array, got {type(data).__name__}")
        return [GeocodeResult.from_json(item) for item in data]


@dataclass(frozen=True)
class CurrentConditions:
    temp: float
    description: str

    @staticmethod
    def from_json(data: Any) -> 'CurrentConditions':
        if not isinstance(data, dict):
            raise WeatherDecodeError("current: expected an object")
        return CurrentConditions(
            temp=_number(data.get('temp'), 'current temp'),
            description=_first_description(data, 'current'),
        )


@dataclass(frozen=True)
class DailyForecast:
    day_temp: float
    description: str

    @staticmethod
    def from_json(data: Any, index: int) -> 'DailyForecast':
        where = f"daily[{index}]"
        if not isinstance(data, dict):
            raise WeatherDecodeError(f"{where}: expected an object")
        temp = data.get('temp')
        if not isinstance(temp, dict):
            raise WeatherDecodeError(f"{where}: missing 'temp' object")
        return DailyForecast(
            day_temp=_number(temp.get('day'), f"{where} temp.day"),
            description=_first_description(data, where),
        )


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions plus the daily forecast; daily[0] is today."""
    current: CurrentConditions
    daily: List[DailyForecast]

    @staticmethod
    def from_json(data: Any) -> 'WeatherSnapshot':
        if not isinstance(data, dict):
            raise WeatherDecodeError(f"onecall response: expected an object, got {type(data).__name__}")
        if 'current' not in data:
            raise WeatherDecodeError("onecall response: missing 'current'")
        daily = data.get('daily')
        if not isinstance(daily, list):
            raise WeatherDecodeError("onecall response: missing 'daily' array")
        return WeatherSnapshot(
            current=CurrentConditions.from_json(data['current']),
            daily=[DailyForecast.from_json(d, i) for i, d in enumerate(daily)],
        )
