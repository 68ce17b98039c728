"""Synthetic leg candidates for a city pair.

Options are generated from the static catalog and the estimator tables,
not from live inventory: prices and times are estimates.
"""

import uuid
import zlib
from datetime import datetime, timedelta

from backend.multicity.adapters.catalog import city_key, lookup_airports, lookup_stations
from backend.multicity.adapters.provenance import provenance_for_estimate
from backend.multicity.config import Settings, get_settings
from backend.multicity.models.city import CityDestination
from backend.multicity.models.common import CarrierType, TransportMode
from backend.multicity.models.preferences import TravelerInfo
from backend.multicity.models.transport import (
    BusAmenities,
    BusLeg,
    CarrierInfo,
    FlightLeg,
    InterCityLeg,
    TrainAmenities,
    TrainLeg,
)
from backend.multicity.transport.estimator import (
    estimate_carbon,
    estimate_cost,
    estimate_travel_time,
)

AIRLINE = CarrierInfo(name="Sample Airlines", code="SA", type=CarrierType.airline)
RAIL_OPERATOR = CarrierInfo(name="Rail Europe", code="RE", type=CarrierType.rail_operator)
BUS_COMPANY = CarrierInfo(name="FlixBus", code="FLX", type=CarrierType.bus_company)

HIGH_SPEED_MIN_MINUTES = 180
DINING_CAR_MIN_MINUTES = 120
OVERNIGHT_BUS_MIN_MINUTES = 300


def new_leg_id() -> str:
    """Unique leg identifier."""
    return f"leg_{uuid.uuid4().hex[:12]}"


def _route_ref(from_city: CityDestination, to_city: CityDestination) -> str:
    return f"{city_key(from_city)}_{city_key(to_city)}"


def _vehicle_number(prefix: str, route_ref: str, low: int, high: int) -> str:
    """Stable vehicle number for a route, in [low, high)."""
    return f"{prefix}{low + zlib.crc32(route_ref.encode()) % (high - low)}"


def generate_flight_option(
    from_city: CityDestination,
    to_city: CityDestination,
    departure_time: datetime,
    travelers: TravelerInfo,
    settings: Settings | None = None,
) -> FlightLeg | None:
    """Direct flight between the first major airport on each side.

    Returns None unless both cities have at least one airport in the catalog.
    """
    from_airports = lookup_airports(from_city)
    to_airports = lookup_airports(to_city)
    if not from_airports or not to_airports:
        return None

    route_ref = _route_ref(from_city, to_city)
    duration = estimate_travel_time(from_city, to_city, TransportMode.flight)

    return FlightLeg(
        id=new_leg_id(),
        from_city=from_city,
        to_city=to_city,
        transport_mode=TransportMode.flight,
        departure_time=departure_time,
        arrival_time=departure_time + timedelta(minutes=duration),
        duration_minutes=duration,
        carrier=AIRLINE,
        price=estimate_cost(from_city, to_city, TransportMode.flight, travelers, settings),
        carbon_footprint=estimate_carbon(from_city, to_city, TransportMode.flight, travelers),
        provenance=provenance_for_estimate("estimate.flight", route_ref),
        flight_number=_vehicle_number(AIRLINE.code, route_ref, 1000, 10000),
        departure_airport=from_airports[0],
        arrival_airport=to_airports[0],
        stops=0,
    )


def generate_train_option(
    from_city: CityDestination,
    to_city: CityDestination,
    departure_time: datetime,
    travelers: TravelerInfo,
    settings: Settings | None = None,
) -> TrainLeg | None:
    """Train between the first major station on each side.

    Returns None unless both cities have at least one station in the catalog.
    """
    from_stations = lookup_stations(from_city)
    to_stations = lookup_stations(to_city)
    if not from_stations or not to_stations:
        return None

    route_ref = _route_ref(from_city, to_city)
    duration = estimate_travel_time(from_city, to_city, TransportMode.train)

    return TrainLeg(
        id=new_leg_id(),
        from_city=from_city,
        to_city=to_city,
        transport_mode=TransportMode.train,
        departure_time=departure_time,
        arrival_time=departure_time + timedelta(minutes=duration),
        duration_minutes=duration,
        carrier=RAIL_OPERATOR,
        price=estimate_cost(from_city, to_city, TransportMode.train, travelers, settings),
        carbon_footprint=estimate_carbon(from_city, to_city, TransportMode.train, travelers),
        provenance=provenance_for_estimate("estimate.train", route_ref),
        train_number=_vehicle_number(RAIL_OPERATOR.code, route_ref, 100, 1000),
        train_type="high_speed" if duration > HIGH_SPEED_MIN_MINUTES else "intercity",
        departure_station=from_stations[0],
        arrival_station=to_stations[0],
        amenities=TrainAmenities(
            wifi=True,
            power_outlets=True,
            dining_car=duration > DINING_CAR_MIN_MINUTES,
            quiet_car=True,
            accessibility=True,
        ),
    )


def generate_bus_option(
    from_city: CityDestination,
    to_city: CityDestination,
    departure_time: datetime,
    travelers: TravelerInfo,
    settings: Settings | None = None,
) -> BusLeg | None:
    """Coach between central bus terminals.

    Needs no catalog entry, but is suppressed above the bus duration cap.
    """
    duration = estimate_travel_time(from_city, to_city, TransportMode.bus)
    settings = settings or get_settings()
    if duration > settings.bus_max_duration_minutes:
        return None

    route_ref = _route_ref(from_city, to_city)

    return BusLeg(
        id=new_leg_id(),
        from_city=from_city,
        to_city=to_city,
        transport_mode=TransportMode.bus,
        departure_time=departure_time,
        arrival_time=departure_time + timedelta(minutes=duration),
        duration_minutes=duration,
        carrier=BUS_COMPANY,
        price=estimate_cost(from_city, to_city, TransportMode.bus, travelers, settings),
        carbon_footprint=estimate_carbon(from_city, to_city, TransportMode.bus, travelers),
        provenance=provenance_for_estimate("estimate.bus", route_ref),
        bus_number=_vehicle_number(BUS_COMPANY.code, route_ref, 100, 1000),
        bus_type="overnight" if duration > OVERNIGHT_BUS_MIN_MINUTES else "express",
        departure_terminal=f"{from_city.name} Central Bus Station",
        arrival_terminal=f"{to_city.name} Central Bus Station",
        amenities=BusAmenities(
            wifi=True,
            power_outlets=True,
            restroom=True,
            reclining_seats=True,
            entertainment=False,
        ),
    )


def generate_generic_option(
    from_city: CityDestination,
    to_city: CityDestination,
    departure_time: datetime,
    travelers: TravelerInfo,
    mode: TransportMode,
    *,
    is_placeholder: bool = False,
    settings: Settings | None = None,
) -> InterCityLeg:
    """Mode-agnostic leg built from the estimator alone; always produced."""
    duration = estimate_travel_time(from_city, to_city, mode)

    return InterCityLeg(
        id=new_leg_id(),
        from_city=from_city,
        to_city=to_city,
        transport_mode=mode,
        departure_time=departure_time,
        arrival_time=departure_time + timedelta(minutes=duration),
        duration_minutes=duration,
        price=estimate_cost(from_city, to_city, mode, travelers, settings),
        carbon_footprint=estimate_carbon(from_city, to_city, mode, travelers),
        is_placeholder=is_placeholder,
        provenance=provenance_for_estimate(f"estimate.{mode.value}", _route_ref(from_city, to_city)),
    )


def generate_option(
    mode: TransportMode,
    from_city: CityDestination,
    to_city: CityDestination,
    departure_time: datetime,
    travelers: TravelerInfo,
    settings: Settings | None = None,
) -> InterCityLeg | None:
    """Dispatch to the generator for a mode; None means "not offered"."""
    if mode == TransportMode.flight:
        return generate_flight_option(from_city, to_city, departure_time, travelers, settings)
    if mode == TransportMode.train:
        return generate_train_option(from_city, to_city, departure_time, travelers, settings)
    if mode == TransportMode.bus:
        return generate_bus_option(from_city, to_city, departure_time, travelers, settings)
    return generate_generic_option(
        from_city, to_city, departure_time, travelers, mode, settings=settings
    )
