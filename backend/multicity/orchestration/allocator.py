"""Night allocation - split the trip's nights across sequenced cities."""

from datetime import date, timedelta

from backend.multicity.models.city import CityDestination
from backend.multicity.models.preferences import MultiCityPreferences
from backend.multicity.models.trip import CityNightsAllocation
from backend.multicity.transport.estimator import round_half_up

MAJOR_CITIES = frozenset(
    {
        "Tokyo",
        "Paris",
        "London",
        "New York",
        "Rome",
        "Barcelona",
        "Sydney",
        "Los Angeles",
        "Berlin",
        "Amsterdam",
        "Bangkok",
        "Singapore",
    }
)

TRAVEL_DAY = timedelta(days=1)


def city_score(city: CityDestination) -> float:
    """Allocation weight: 1.0, plus 0.5 for major cities."""
    score = 1.0
    if city.name in MAJOR_CITIES:
        score += 0.5
    return score


def available_nights(
    city_count: int, start_date: date, end_date: date, *, return_to_start: bool = False
) -> int:
    """Nights left once one travel day per leg is reserved."""
    total_nights = (end_date - start_date).days
    travel_days = city_count - 1 + (1 if return_to_start else 0)
    return max(0, total_nights - travel_days)


def allocate_nights(
    ordered_cities: list[CityDestination],
    start_date: date,
    end_date: date,
    preferences: MultiCityPreferences,
    *,
    return_to_start: bool = False,
) -> list[CityNightsAllocation]:
    """Distribute nights proportionally to city scores, then clamp.

    Each share is rounded, clamped to [min_nights_per_city,
    max_nights_per_city] and floored at 1. The clamps are not renormalized,
    so the total can exceed available_nights() on tight trips.

    Dates run sequentially: the first city arrives on start_date, each
    following city one travel day after the previous departure.
    """
    if not ordered_cities:
        return []

    nights_pool = available_nights(
        len(ordered_cities), start_date, end_date, return_to_start=return_to_start
    )
    scores = [city_score(city) for city in ordered_cities]
    total_score = sum(scores)

    allocations: list[CityNightsAllocation] = []
    arrival = start_date

    for city, score in zip(ordered_cities, scores, strict=True):
        nights = int(round_half_up(score / total_score * nights_pool))
        nights = max(preferences.min_nights_per_city, nights)
        nights = min(preferences.max_nights_per_city, nights)
        nights = max(1, nights)

        departure = arrival + timedelta(days=nights)
        allocations.append(
            CityNightsAllocation(
                city=city,
                nights=nights,
                arrival_date=arrival,
                departure_date=departure,
            )
        )
        arrival = departure + TRAVEL_DAY

    return allocations
