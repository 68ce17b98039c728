"""Tests for stop layout and per-city day skeletons."""

from collections.abc import Callable
from datetime import date, datetime, time

from backend.multicity.config import Settings
from backend.multicity.models import CityDestination, DayType, InterCityLeg
from backend.multicity.orchestration.schedule import (
    build_city_itineraries,
    build_city_itinerary,
    layout_stops,
    legs_for_stop,
)

SETTINGS = Settings()


def test_layout_one_way(
    paris: CityDestination, barcelona: CityDestination, rome: CityDestination
) -> None:
    """Test flags, order and contiguous dates for a one-way trip."""
    stops = layout_stops([(paris, 3), (barcelona, 2), (rome, 4)], date(2025, 6, 1))

    assert [s.order for s in stops] == [0, 1, 2]
    assert [s.is_origin for s in stops] == [True, False, False]
    assert [s.is_final_destination for s in stops] == [False, False, True]
    assert not any(s.is_return for s in stops)
    assert stops[0].id == "stop_0_paris"
    assert stops[1].arrival_date == date(2025, 6, 5)
    assert stops[2].departure_date == date(2025, 6, 12)
    for stop in stops:
        assert (stop.departure_date - stop.arrival_date).days == stop.nights


def test_layout_round_trip_appends_return_stop(
    paris: CityDestination, barcelona: CityDestination
) -> None:
    """Test the 0-night closing stop at the origin."""
    stops = layout_stops([(paris, 2), (barcelona, 2)], date(2025, 6, 1), return_to_start=True)

    assert len(stops) == 3
    closing = stops[-1]
    assert closing.is_return
    assert closing.city.id == "paris"
    assert closing.nights == 0
    assert closing.arrival_date == closing.departure_date == date(2025, 6, 7)
    assert closing.order == 2
    assert not any(s.is_final_destination for s in stops)


def test_layout_empty() -> None:
    """Test no visits gives no stops, even for a round trip."""
    assert layout_stops([], date(2025, 6, 1), return_to_start=True) == []


def test_itinerary_day_types(paris: CityDestination) -> None:
    """Test nights + 1 days: arrival, full days, departure."""
    stop = layout_stops([(paris, 3)], date(2025, 6, 1))[0]

    itinerary = build_city_itinerary(stop, None, None, SETTINGS)

    assert itinerary.city_id == "paris"
    assert itinerary.start_date == date(2025, 6, 1)
    assert itinerary.end_date == date(2025, 6, 4)
    assert [d.day_type for d in itinerary.days] == [
        DayType.arrival,
        DayType.full,
        DayType.full,
        DayType.departure,
    ]
    assert [d.day_number for d in itinerary.days] == [1, 2, 3, 4]
    assert itinerary.days[-1].date == date(2025, 6, 4)
    assert all(d.activities == [] and d.meals == [] for d in itinerary.days)


def test_default_day_window_without_legs(paris: CityDestination) -> None:
    """Test the 09:00-21:00 window when no legs trim it."""
    stop = layout_stops([(paris, 2)], date(2025, 6, 1))[0]

    itinerary = build_city_itinerary(stop, None, None, SETTINGS)

    for day in itinerary.days:
        assert day.available_hours.start == time(9)
        assert day.available_hours.end == time(21)


def test_arrival_and_departure_trimming(
    paris: CityDestination,
    rome: CityDestination,
    leg_factory: Callable[..., InterCityLeg],
) -> None:
    """Test buffers around the arriving and departing legs."""
    stop = layout_stops([(paris, 2)], date(2025, 6, 1))[0]
    arriving = leg_factory(rome, paris, datetime(2025, 6, 1, 12, 0), 120)  # lands 14:00
    departing = leg_factory(paris, rome, datetime(2025, 6, 3, 15, 0), 120)

    itinerary = build_city_itinerary(stop, arriving, departing, SETTINGS)

    assert itinerary.days[0].available_hours.start == time(16)
    assert itinerary.days[0].available_hours.end == time(21)
    assert itinerary.days[1].available_hours.start == time(9)
    assert itinerary.days[-1].available_hours.start == time(9)
    assert itinerary.days[-1].available_hours.end == time(13)


def test_trimming_is_clamped(
    paris: CityDestination,
    rome: CityDestination,
    leg_factory: Callable[..., InterCityLeg],
) -> None:
    """Test late arrivals cap at 18:00 and early departures floor at 09:00."""
    stop = layout_stops([(paris, 1)], date(2025, 6, 1))[0]
    late = leg_factory(rome, paris, datetime(2025, 6, 1, 19, 0), 60)  # lands 20:00
    early = leg_factory(paris, rome, datetime(2025, 6, 2, 6, 0), 60)

    itinerary = build_city_itinerary(stop, late, early, SETTINGS)

    assert itinerary.days[0].available_hours.start == time(18)
    assert itinerary.days[1].available_hours.end == time(9)


def test_early_arrival_keeps_day_start(
    paris: CityDestination,
    rome: CityDestination,
    leg_factory: Callable[..., InterCityLeg],
) -> None:
    """Test that arriving at dawn does not open the day before 09:00."""
    stop = layout_stops([(paris, 2)], date(2025, 6, 1))[0]
    dawn = leg_factory(rome, paris, datetime(2025, 6, 1, 3, 0), 60)  # lands 04:00

    itinerary = build_city_itinerary(stop, dawn, None, SETTINGS)

    assert itinerary.days[0].available_hours.start == time(9)


def test_legs_for_stop(
    paris: CityDestination,
    rome: CityDestination,
    leg_factory: Callable[..., InterCityLeg],
) -> None:
    """Test arriving/departing leg lookup at both ends."""
    first = leg_factory(paris, rome, datetime(2025, 6, 3, 9), leg_id="t0")
    second = leg_factory(rome, paris, datetime(2025, 6, 6, 9), leg_id="t1")
    transitions = [first, second]

    assert legs_for_stop(0, transitions) == (None, first)
    assert legs_for_stop(1, transitions) == (first, second)
    assert legs_for_stop(2, transitions) == (second, None)


def test_itineraries_skip_return_stop(
    paris: CityDestination,
    barcelona: CityDestination,
    leg_factory: Callable[..., InterCityLeg],
) -> None:
    """Test one itinerary per visited city, none for the return."""
    stops = layout_stops([(paris, 2), (barcelona, 2)], date(2025, 6, 1), return_to_start=True)
    transitions = [
        leg_factory(paris, barcelona, datetime(2025, 6, 3, 9), leg_id="t0"),
        leg_factory(barcelona, paris, datetime(2025, 6, 6, 9), leg_id="t1"),
    ]

    itineraries = build_city_itineraries(stops, transitions, SETTINGS)

    assert set(itineraries) == {"paris", "barcelona"}
    assert itineraries["paris"].start_date == date(2025, 6, 1)
    assert len(itineraries["barcelona"].days) == 3
