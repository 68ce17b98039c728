"""Tests for the static destination, airport and station tables."""

from collections.abc import Callable

from backend.multicity.adapters.catalog import (
    city_key,
    find_city,
    get_city,
    list_destinations,
    lookup_airports,
    lookup_stations,
    normalize_city_name,
)
from backend.multicity.models import CityDestination


def test_normalize_city_name() -> None:
    """Test lowercasing and collapsing of non-letters."""
    assert normalize_city_name("Paris") == "paris"
    assert normalize_city_name("New York") == "new_york"
    assert normalize_city_name("  new-york ") == "new_york"


def test_city_key_prefers_dataset_id(paris: CityDestination) -> None:
    """Test that a dataset city is keyed by its canonical id."""
    assert city_key(paris) == "paris"
    assert city_key(get_city("new_york")) == "new_york"  # type: ignore[arg-type]


def test_city_key_falls_back_to_name(city_factory: Callable[..., CityDestination]) -> None:
    """Test that caller-supplied cities resolve by name."""
    custom = city_factory("city_paris_custom", 48.85, 2.35, name="Paris")

    assert city_key(custom) == "paris"
    assert lookup_airports(custom)[0].code == "CDG"


def test_lookup_airports_and_stations() -> None:
    """Test lookups for known cities keep dataset order."""
    airports = lookup_airports("London")
    stations = lookup_stations("rome")

    assert [a.code for a in airports] == ["LHR", "LGW", "STN"]
    assert stations[0].name == "Roma Termini"


def test_unknown_city_lookups_are_empty() -> None:
    """Test that unknown cities are a normal empty result."""
    assert lookup_airports("Atlantis") == []
    assert lookup_stations("Atlantis") == []
    assert get_city("atlantis") is None
    assert find_city("Atlantis") is None


def test_city_without_stations() -> None:
    """Test a city with an airport but no rail entry."""
    assert lookup_airports("Lisbon")
    assert lookup_stations("Lisbon") == []


def test_get_city_builds_destination() -> None:
    """Test that dataset rows become full destinations."""
    rome = get_city("rome")

    assert rome is not None
    assert rome.name == "Rome"
    assert rome.country_code == "IT"
    assert rome.timezone == "Europe/Rome"
    assert rome.coordinates.lat == 41.9028
    assert "FCO" in rome.airport_codes


def test_find_city_by_display_name() -> None:
    """Test free-form name resolution."""
    city = find_city("New York")

    assert city is not None
    assert city.id == "new_york"


def test_list_destinations_covers_dataset() -> None:
    """Test that every dataset row is listed once."""
    ids = [city.id for city in list_destinations()]

    assert len(ids) == len(set(ids))
    assert {"paris", "rome", "barcelona", "tokyo", "new_york"} <= set(ids)
