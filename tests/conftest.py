"""Shared pytest fixtures for all test suites."""

from collections.abc import Callable
from datetime import date, datetime, timedelta

import pytest

from backend.multicity.adapters.catalog import get_city
from backend.multicity.models import (
    CarbonFootprint,
    CityDestination,
    Geo,
    InterCityLeg,
    Money,
    MultiCityGenerationRequest,
    MultiCityPreferences,
    TransportMode,
    TravelerInfo,
)


def make_city(
    city_id: str,
    lat: float,
    lon: float,
    *,
    name: str | None = None,
    country_code: str = "XX",
    timezone: str = "UTC",
) -> CityDestination:
    """Caller-supplied city that is not in the reference dataset."""
    return CityDestination(
        id=city_id,
        name=name or city_id.title(),
        country="Testland",
        country_code=country_code,
        coordinates=Geo(lat=lat, lon=lon),
        timezone=timezone,
        currency="EUR",
        language="en",
    )


def require_city(city_id: str) -> CityDestination:
    city = get_city(city_id)
    assert city is not None, f"{city_id} missing from dataset"
    return city


@pytest.fixture
def paris() -> CityDestination:
    return require_city("paris")


@pytest.fixture
def rome() -> CityDestination:
    return require_city("rome")


@pytest.fixture
def barcelona() -> CityDestination:
    return require_city("barcelona")


@pytest.fixture
def travelers() -> TravelerInfo:
    return TravelerInfo(adults=1)


@pytest.fixture
def round_trip_request(
    paris: CityDestination, rome: CityDestination, barcelona: CityDestination
) -> MultiCityGenerationRequest:
    """Paris, Rome, Barcelona over 9 nights, back to Paris."""
    return MultiCityGenerationRequest(
        cities=[paris, rome, barcelona],
        start_date=date(2025, 6, 1),
        end_date=date(2025, 6, 10),
        start_city=paris,
        travelers=TravelerInfo(adults=1),
        preferences=MultiCityPreferences(),
        return_to_start=True,
    )


@pytest.fixture
def one_way_request(
    paris: CityDestination, rome: CityDestination, barcelona: CityDestination
) -> MultiCityGenerationRequest:
    """Paris to Rome via Barcelona over 12 nights."""
    return MultiCityGenerationRequest(
        cities=[paris, barcelona, rome],
        start_date=date(2025, 6, 1),
        end_date=date(2025, 6, 13),
        start_city=paris,
        end_city=rome,
        travelers=TravelerInfo(adults=2),
        preferences=MultiCityPreferences(),
    )


@pytest.fixture
def city_factory() -> Callable[..., CityDestination]:
    """Factory for cities outside the reference dataset."""
    return make_city


def make_leg(
    from_city: CityDestination,
    to_city: CityDestination,
    departure_time: datetime,
    duration_minutes: int = 120,
    *,
    mode: TransportMode = TransportMode.train,
    price: int | None = 100,
    kg_co2: float | None = 10.0,
    leg_id: str = "leg_test",
    is_placeholder: bool = False,
) -> InterCityLeg:
    """Leg with explicit timing, price and carbon."""
    return InterCityLeg(
        id=leg_id,
        from_city=from_city,
        to_city=to_city,
        transport_mode=mode,
        departure_time=departure_time,
        arrival_time=departure_time + timedelta(minutes=duration_minutes),
        duration_minutes=duration_minutes,
        price=Money(amount=price) if price is not None else None,
        carbon_footprint=CarbonFootprint(kg_co2=kg_co2) if kg_co2 is not None else None,
        is_placeholder=is_placeholder,
    )


@pytest.fixture
def leg_factory() -> Callable[..., InterCityLeg]:
    """Factory for hand-built legs."""
    return make_leg
