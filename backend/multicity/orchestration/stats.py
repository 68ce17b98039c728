"""Trip statistics - a pure function of stops, transitions and itineraries."""

from backend.multicity.config import Settings, get_settings
from backend.multicity.models.common import CarbonFootprint, Money, TransportMode
from backend.multicity.models.transport import InterCityLeg
from backend.multicity.models.trip import CityItinerary, CityStop, MultiCityTripStats
from backend.multicity.transport.estimator import round_half_up


def _unique(values: list[str]) -> list[str]:
    """Distinct values in first-seen order."""
    return list(dict.fromkeys(values))


def compute_trip_stats(
    stops: list[CityStop],
    transitions: list[InterCityLeg],
    city_itineraries: dict[str, CityItinerary],
    settings: Settings | None = None,
) -> MultiCityTripStats:
    """Aggregate totals for a trip; empty inputs give zeroed stats.

    total_days spans first arrival to last departure inclusive. Cities are
    counted once even when the trip returns to its origin.
    """
    currency = (settings or get_settings()).reporting_currency
    if not stops and not transitions:
        return MultiCityTripStats(estimated_transport_cost=Money(amount=0, currency=currency))

    total_nights = sum(stop.nights for stop in stops)
    total_days = (stops[-1].departure_date - stops[0].arrival_date).days + 1 if stops else 0

    def minutes_for(mode: TransportMode) -> int:
        return sum(t.duration_minutes for t in transitions if t.transport_mode == mode)

    total_activities = sum(
        len(day.activities) for itinerary in city_itineraries.values() for day in itinerary.days
    )
    transport_cost = sum(t.price.amount for t in transitions if t.price is not None)
    carbon = sum(t.carbon_footprint.kg_co2 for t in transitions if t.carbon_footprint is not None)

    timezones = _unique([stop.city.timezone for stop in stops])

    return MultiCityTripStats(
        total_days=total_days,
        total_cities=len({stop.city.id for stop in stops}),
        total_nights=total_nights,
        total_flight_minutes=minutes_for(TransportMode.flight),
        total_train_minutes=minutes_for(TransportMode.train),
        total_transit_minutes=sum(t.duration_minutes for t in transitions),
        total_activities=total_activities,
        estimated_transport_cost=Money(amount=transport_cost, currency=currency),
        carbon_footprint=CarbonFootprint(kg_co2=round_half_up(carbon, 1)),
        countries_visited=_unique([stop.city.country_code for stop in stops]),
        timezones=timezones,
        timezones_traversed=len(timezones),
    )
