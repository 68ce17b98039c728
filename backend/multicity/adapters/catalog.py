"""Static reference data: destinations, major airports and train stations.

All tables are keyed by canonical city id (e.g. "paris", "new_york") and
loaded from the JSON fixtures shipped with the package. Unknown cities are
not an error: lookups return empty lists, which downstream means "this
mode is not servable".
"""

import json
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

from backend.multicity.models.city import AirportInfo, CityDestination, StationInfo
from backend.multicity.models.common import Geo

FIXTURES_DIR = Path(__file__).parent / "fixtures"

_NON_LETTERS = re.compile(r"[^a-z]+")


@lru_cache
def _load_fixture(name: str) -> dict[str, Any]:
    with open(FIXTURES_DIR / name, encoding="utf-8") as f:
        data: dict[str, Any] = json.load(f)
    return data


def normalize_city_name(name: str) -> str:
    """Lowercase a city name and collapse non-letter runs to "_"."""
    return _NON_LETTERS.sub("_", name.lower()).strip("_")


def city_key(city: CityDestination | str) -> str:
    """Canonical lookup key for a city or city name.

    A CityDestination whose id is a known dataset id uses that id directly;
    anything else falls back to the normalized name.
    """
    if isinstance(city, CityDestination):
        if city.id in _load_fixture("cities.json"):
            return city.id
        return normalize_city_name(city.name)
    return normalize_city_name(city)


def lookup_airports(city: CityDestination | str) -> list[AirportInfo]:
    """Major airports serving a city (empty if unknown)."""
    entries = _load_fixture("airports.json").get(city_key(city), [])
    return [AirportInfo(**entry) for entry in entries]


def lookup_stations(city: CityDestination | str) -> list[StationInfo]:
    """Major train stations serving a city (empty if unknown)."""
    entries = _load_fixture("stations.json").get(city_key(city), [])
    return [StationInfo(**entry) for entry in entries]


def get_city(city_id: str) -> CityDestination | None:
    """Destination by canonical id, or None."""
    data = _load_fixture("cities.json").get(city_id)
    if data is None:
        return None

    return CityDestination(
        id=city_id,
        name=data["name"],
        country=data["country"],
        country_code=data["country_code"],
        coordinates=Geo(**data["coordinates"]),
        timezone=data["timezone"],
        currency=data["currency"],
        language=data["language"],
        airport_codes=tuple(data.get("airport_codes", [])),
        train_station_codes=tuple(data.get("train_station_codes", [])),
    )


def find_city(name: str) -> CityDestination | None:
    """Destination by free-form name ("New York", "new-york"), or None."""
    return get_city(normalize_city_name(name))


def list_destinations() -> list[CityDestination]:
    """All known destinations, in dataset order."""
    destinations = []
    for city_id in _load_fixture("cities.json"):
        city = get_city(city_id)
        if city is not None:
            destinations.append(city)
    return destinations
