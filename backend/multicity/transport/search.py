"""Transport search: generate, filter and rank options for a city pair."""

import logging
from datetime import UTC, datetime, time

from backend.multicity.adapters.catalog import find_city
from backend.multicity.adapters.geo import city_distance_km
from backend.multicity.config import Settings, get_settings
from backend.multicity.models.city import CityDestination
from backend.multicity.models.common import TransportMode
from backend.multicity.models.transport import (
    FlightLeg,
    InterCityLeg,
    TransportSearchRequest,
    TransportSearchResult,
)
from backend.multicity.transport.options import generate_option

logger = logging.getLogger(__name__)

# Distance tiers (km) for the default mode list
BUS_PREFERRED_MAX_KM = 300
TRAIN_PREFERRED_MAX_KM = 800
FLIGHT_PREFERRED_MAX_KM = 1500

# Rail bonus applies below this duration (minutes)
TRAIN_BONUS_MAX_MINUTES = 300


def recommended_modes(from_city: CityDestination, to_city: CityDestination) -> list[TransportMode]:
    """Candidate modes by distance: ground transport for short and medium hops."""
    distance = city_distance_km(from_city, to_city)

    if distance <= BUS_PREFERRED_MAX_KM:
        return [TransportMode.bus, TransportMode.train, TransportMode.car_rental]
    if distance <= TRAIN_PREFERRED_MAX_KM:
        return [TransportMode.train, TransportMode.bus, TransportMode.flight]
    if distance <= FLIGHT_PREFERRED_MAX_KM:
        return [TransportMode.train, TransportMode.flight]
    return [TransportMode.flight]


def score_option(option: InterCityLeg) -> float:
    """Weighted score balancing carbon, price and duration (higher is better).

    Components:
    1. Carbon: -0.5 per kg CO2
    2. Price: -0.1 per currency unit
    3. Duration: -0.05 per minute
    4. Rail bonus: +20 for trains under 5 hours
    """
    score = 100.0

    if option.carbon_footprint is not None:
        score -= option.carbon_footprint.kg_co2 * 0.5

    if option.price is not None:
        score -= option.price.amount * 0.1

    score -= option.duration_minutes * 0.05

    if option.transport_mode == TransportMode.train and option.duration_minutes < TRAIN_BONUS_MAX_MINUTES:
        score += 20

    return score


def _resolve_city(city: CityDestination | str) -> CityDestination | None:
    if isinstance(city, CityDestination):
        return city
    return find_city(city)


def passes_filters(option: InterCityLeg, request: TransportSearchRequest) -> bool:
    """Price, duration and direct-flight constraints of a request."""
    if request.max_price is not None and option.price is not None:
        if option.price.amount > request.max_price.amount:
            return False
    if request.max_duration is not None and option.duration_minutes > request.max_duration:
        return False
    if request.direct_only and isinstance(option, FlightLeg) and option.stops > 0:
        return False
    return True


def search_transport_options(
    request: TransportSearchRequest, settings: Settings | None = None
) -> TransportSearchResult:
    """Generate all viable options for a city pair and pick the best ones.

    An empty result (no options, all picks None) is a normal outcome for
    unknown cities or over-restrictive filters, not an error.
    """
    settings = settings or get_settings()
    searched_at = datetime.now(UTC)

    from_city = _resolve_city(request.from_city)
    to_city = _resolve_city(request.to_city)
    if from_city is None or to_city is None:
        unknown = request.from_city if from_city is None else request.to_city
        logger.warning(
            f"Transport search: unknown city {unknown!r}",
            extra={"structured": {"unknown_city": str(unknown)}},
        )
        return TransportSearchResult(searched_at=searched_at)

    departure_time = datetime.combine(
        request.departure_date, time(hour=settings.default_departure_hour)
    )
    modes = request.preferred_modes or recommended_modes(from_city, to_city)

    options: list[InterCityLeg] = []
    for mode in modes:
        option = generate_option(
            mode, from_city, to_city, departure_time, request.travelers, settings
        )
        if option is None:
            continue
        if not passes_filters(option, request):
            continue
        options.append(option)

    if not options:
        logger.info(
            f"Transport search: no options {from_city.name} -> {to_city.name}",
            extra={
                "structured": {
                    "from_city": from_city.id,
                    "to_city": to_city.id,
                    "modes": [m.value for m in modes],
                }
            },
        )
        return TransportSearchResult(searched_at=searched_at)

    # sorted() and max() are stable: ties keep generation order
    cheapest = sorted(options, key=lambda o: o.price.amount if o.price else 0)[0]
    fastest = sorted(options, key=lambda o: o.duration_minutes)[0]
    recommended = max(options, key=score_option)

    return TransportSearchResult(
        options=options,
        cheapest=cheapest,
        fastest=fastest,
        recommended=recommended,
        searched_at=searched_at,
    )


async def search_transport_options_async(
    request: TransportSearchRequest, settings: Settings | None = None
) -> TransportSearchResult:
    """Awaitable search, the unit of work fanned out per leg."""
    return search_transport_options(request, settings)
