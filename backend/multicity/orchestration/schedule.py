"""Stop layout and per-city day skeletons."""

from datetime import date, time, timedelta

from backend.multicity.config import Settings, get_settings
from backend.multicity.models.city import CityDestination
from backend.multicity.models.common import DayType, TimeWindow
from backend.multicity.models.transport import InterCityLeg
from backend.multicity.models.trip import (
    CityDaySchedule,
    CityItinerary,
    CityNightsAllocation,
    CityStop,
)
from backend.multicity.orchestration.allocator import TRAVEL_DAY


def stop_id(order: int, city: CityDestination) -> str:
    return f"stop_{order}_{city.id}"


def layout_stops(
    visits: list[tuple[CityDestination, int]],
    start_date: date,
    *,
    return_to_start: bool = False,
) -> list[CityStop]:
    """Lay out (city, nights) visits as contiguous, numbered stops.

    Dates start at start_date with one travel day between consecutive stops.
    The first stop is the origin; the last is the final destination unless
    the trip returns to start, in which case a 0-night return stop at the
    origin city closes the list.
    """
    stops: list[CityStop] = []
    arrival = start_date

    for order, (city, nights) in enumerate(visits):
        departure = arrival + timedelta(days=nights)
        stops.append(
            CityStop(
                id=stop_id(order, city),
                city=city,
                arrival_date=arrival,
                departure_date=departure,
                nights=nights,
                is_origin=order == 0,
                is_final_destination=order == len(visits) - 1 and not return_to_start,
                order=order,
            )
        )
        arrival = departure + TRAVEL_DAY

    if return_to_start and stops:
        origin = stops[0].city
        stops.append(
            CityStop(
                id=f"stop_return_{origin.id}",
                city=origin,
                arrival_date=arrival,
                departure_date=arrival,
                nights=0,
                is_origin=False,
                is_final_destination=False,
                is_return=True,
                order=len(stops),
            )
        )

    return stops


def build_city_stops(
    allocations: list[CityNightsAllocation], *, return_to_start: bool = False
) -> list[CityStop]:
    """Stops from a night allocation."""
    if not allocations:
        return []
    visits = [(a.city, a.nights) for a in allocations]
    return layout_stops(visits, allocations[0].arrival_date, return_to_start=return_to_start)


def _available_hours(
    day_type: DayType,
    arrival_leg: InterCityLeg | None,
    departure_leg: InterCityLeg | None,
    settings: Settings,
) -> TimeWindow:
    start_hour = settings.day_start_hour
    end_hour = settings.day_end_hour

    if day_type == DayType.arrival and arrival_leg is not None:
        start_hour = min(
            settings.latest_arrival_start_hour,
            arrival_leg.arrival_time.hour + settings.arrival_buffer_hours,
        )
        start_hour = max(settings.day_start_hour, start_hour)

    if day_type == DayType.departure and departure_leg is not None:
        end_hour = max(
            settings.day_start_hour,
            departure_leg.departure_time.hour - settings.departure_buffer_hours,
        )
        end_hour = min(settings.day_end_hour, end_hour)

    return TimeWindow(start=time(hour=start_hour), end=time(hour=end_hour))


def build_city_itinerary(
    stop: CityStop,
    arrival_leg: InterCityLeg | None,
    departure_leg: InterCityLeg | None,
    settings: Settings | None = None,
) -> CityItinerary:
    """Day skeleton for one stop: nights + 1 days, arrival through departure.

    Activities and meals are left empty for the activity service.
    """
    settings = settings or get_settings()
    days: list[CityDaySchedule] = []

    for day_num in range(stop.nights + 1):
        if day_num == 0:
            day_type = DayType.arrival
        elif day_num == stop.nights:
            day_type = DayType.departure
        else:
            day_type = DayType.full

        days.append(
            CityDaySchedule(
                date=stop.arrival_date + timedelta(days=day_num),
                day_number=day_num + 1,
                day_type=day_type,
                available_hours=_available_hours(day_type, arrival_leg, departure_leg, settings),
            )
        )

    return CityItinerary(
        city_id=stop.city.id,
        city_name=stop.city.name,
        start_date=stop.arrival_date,
        end_date=stop.departure_date,
        days=days,
    )


def legs_for_stop(
    index: int, transitions: list[InterCityLeg]
) -> tuple[InterCityLeg | None, InterCityLeg | None]:
    """(arriving leg, departing leg) for the stop at index."""
    arrival_leg = transitions[index - 1] if 0 < index <= len(transitions) else None
    departure_leg = transitions[index] if index < len(transitions) else None
    return arrival_leg, departure_leg


def build_city_itineraries(
    stops: list[CityStop],
    transitions: list[InterCityLeg],
    settings: Settings | None = None,
) -> dict[str, CityItinerary]:
    """Day skeletons keyed by city id; the return stop gets none."""
    itineraries: dict[str, CityItinerary] = {}
    for index, stop in enumerate(stops):
        if stop.is_return:
            continue
        arrival_leg, departure_leg = legs_for_stop(index, transitions)
        itineraries[stop.city.id] = build_city_itinerary(stop, arrival_leg, departure_leg, settings)
    return itineraries
