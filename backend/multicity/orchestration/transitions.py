"""Transition planning - one transport search per adjacent stop pair.

Leg searches are independent, so they run concurrently (bounded by
fanout_cap). A leg whose search finds nothing or times out gets an
estimated flight placeholder: a trip never has a missing transition.
"""

import asyncio
from collections.abc import Awaitable, Callable
from datetime import datetime, time
from functools import partial

from backend.multicity.config import Settings, get_settings
from backend.multicity.models.common import TransportMode
from backend.multicity.models.preferences import MultiCityPreferences, TravelerInfo
from backend.multicity.models.transport import (
    InterCityLeg,
    TransportSearchRequest,
    TransportSearchResult,
)
from backend.multicity.models.trip import CityStop
from backend.multicity.transport.estimator import format_duration
from backend.multicity.transport.options import generate_generic_option
from backend.multicity.transport.search import search_transport_options_async
from backend.multicity.utils.logging import StructuredTripLogger
from backend.multicity.utils.metrics import TripMetrics

SearchFn = Callable[[TransportSearchRequest], Awaitable[TransportSearchResult]]


def transition_id(index: int) -> str:
    return f"transition_{index}"


def build_placeholder_leg(
    from_stop: CityStop, to_stop: CityStop, travelers: TravelerInfo, index: int, settings: Settings
) -> InterCityLeg:
    """Estimated flight between two stops; needs no catalog data."""
    departure_time = datetime.combine(
        from_stop.departure_date, time(hour=settings.default_departure_hour)
    )
    leg = generate_generic_option(
        from_stop.city,
        to_stop.city,
        departure_time,
        travelers,
        TransportMode.flight,
        is_placeholder=True,
        settings=settings,
    )
    return leg.model_copy(update={"id": transition_id(index)})


async def plan_transitions(
    stops: list[CityStop],
    travelers: TravelerInfo,
    preferences: MultiCityPreferences,
    *,
    search_fn: SearchFn | None = None,
    settings: Settings | None = None,
    metrics: TripMetrics | None = None,
    trip_logger: StructuredTripLogger | None = None,
) -> list[InterCityLeg]:
    """Pick one leg per adjacent stop pair.

    Selection order is recommended, then cheapest, then the first option.
    Legs are searched in a task group: the first search error cancels the
    searches still in flight and is re-raised as-is.

    Returns:
        len(stops) - 1 legs with ids "transition_<i>", in stop order
    """
    settings = settings or get_settings()
    search = search_fn or partial(search_transport_options_async, settings=settings)
    metrics = metrics or TripMetrics()
    trip_logger = trip_logger or StructuredTripLogger()

    semaphore = asyncio.Semaphore(max(1, settings.fanout_cap))
    timeout_s = settings.leg_search_timeout_ms / 1000

    async def plan_leg(index: int) -> InterCityLeg:
        from_stop = stops[index]
        to_stop = stops[index + 1]
        request = TransportSearchRequest(
            from_city=from_stop.city,
            to_city=to_stop.city,
            departure_date=from_stop.departure_date,
            travelers=travelers,
            preferred_modes=preferences.preferred_transport or None,
            direct_only=preferences.prefer_direct_flights,
        )

        async with semaphore:
            try:
                result = await asyncio.wait_for(search(request), timeout=timeout_s)
            except TimeoutError:
                metrics.inc_placeholder("timeout")
                trip_logger.log_leg(index, from_stop.city.name, to_stop.city.name, "timeout")
                return build_placeholder_leg(from_stop, to_stop, travelers, index, settings)

        best = result.recommended or result.cheapest or (result.options[0] if result.options else None)
        if best is None:
            metrics.inc_placeholder("no_options")
            trip_logger.log_leg(index, from_stop.city.name, to_stop.city.name, "no_options")
            return build_placeholder_leg(from_stop, to_stop, travelers, index, settings)

        trip_logger.log_leg(
            index,
            from_stop.city.name,
            to_stop.city.name,
            "selected",
            mode=best.transport_mode.value,
            duration=format_duration(best.duration_minutes),
        )
        return best.model_copy(update={"id": transition_id(index)})

    try:
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(plan_leg(i)) for i in range(len(stops) - 1)]
    except ExceptionGroup as eg:
        raise eg.exceptions[0] from eg

    return [task.result() for task in tasks]
