"""Multi-city trip orchestration.

Generates a trip from a request (sequence -> allocate nights -> stops ->
transitions -> day skeletons -> stats) and applies add/remove/reorder
mutations. Every operation takes values and returns a new MultiCityTrip
inside a MultiCityResult; no exception escapes an operation.
"""

import logging
import time
import uuid
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from functools import lru_cache

from backend.multicity.config import Settings, get_settings
from backend.multicity.models.city import CityDestination
from backend.multicity.models.common import TripStatus
from backend.multicity.models.transport import InterCityLeg
from backend.multicity.models.trip import (
    CityItinerary,
    CityStop,
    MultiCityGenerationRequest,
    MultiCityResult,
    MultiCityTrip,
)
from backend.multicity.models.violations import Violation
from backend.multicity.orchestration.allocator import allocate_nights, available_nights
from backend.multicity.orchestration.errors import (
    SequencingError,
    TripPlanningError,
    TripStructureError,
    TripValidationError,
)
from backend.multicity.orchestration.schedule import (
    build_city_itineraries,
    build_city_itinerary,
    build_city_stops,
    layout_stops,
    legs_for_stop,
)
from backend.multicity.orchestration.sequencer import sequence_cities
from backend.multicity.orchestration.stats import compute_trip_stats
from backend.multicity.orchestration.transitions import SearchFn, plan_transitions
from backend.multicity.utils.logging import StructuredTripLogger
from backend.multicity.utils.metrics import PrometheusTripMetrics, TripMetrics
from backend.multicity.verification.verifiers import (
    verify_night_allocation,
    verify_transitions,
    verify_transport_budget,
)

logger = logging.getLogger(__name__)


def trip_name(stops: list[CityStop]) -> str:
    """Trip title: cities joined by arrows, abbreviated past three stops."""
    if len(stops) <= 3:
        return " → ".join(stop.city.name for stop in stops)
    return f"{stops[0].city.name} → {len(stops) - 2} cities → {stops[-1].city.name}"


class MultiCityOrchestrator:
    """Stateless façade over the planning pipeline.

    Holds only collaborators (settings, search function, metrics, logger);
    safe to share between callers. Concurrent mutations of the same trip
    must be serialized by the caller.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        search_fn: SearchFn | None = None,
        metrics: TripMetrics | None = None,
        trip_logger: StructuredTripLogger | None = None,
    ) -> None:
        """Initialize orchestrator.

        Args:
            settings: Engine settings (default: get_settings())
            search_fn: Async per-leg transport search (default: synthetic search)
            metrics: Metrics recorder (optional, defaults to no-op)
            trip_logger: Structured logger (optional)
        """
        self._settings = settings or get_settings()
        self._search_fn = search_fn
        self._metrics = metrics or TripMetrics()
        self._logger = trip_logger or StructuredTripLogger()

    # ------------------------------------------------------------------
    # Operation boundary
    # ------------------------------------------------------------------

    async def _run(
        self, operation: str, fn: Callable[[], Awaitable[MultiCityResult]]
    ) -> MultiCityResult:
        start_time = time.monotonic()
        try:
            result = await fn()
        except TripPlanningError as e:
            result = MultiCityResult(success=False, error=str(e))
        except Exception as e:
            logger.exception(f"Trip operation {operation} failed unexpectedly")
            result = MultiCityResult(success=False, error=str(e) or type(e).__name__)

        elapsed_ms = (time.monotonic() - start_time) * 1000
        outcome = "success" if result.success else "failure"
        self._metrics.record_operation(operation, outcome, elapsed_ms)
        self._logger.log_operation(
            operation,
            outcome,
            elapsed_ms,
            trip_id=result.trip.id if result.trip else None,
            warnings=len(result.warnings),
            error_reason=result.error,
        )
        return result

    async def _plan_transitions(
        self, trip_like: MultiCityTrip | MultiCityGenerationRequest, stops: list[CityStop]
    ) -> list[InterCityLeg]:
        return await plan_transitions(
            stops,
            trip_like.travelers,
            trip_like.preferences,
            search_fn=self._search_fn,
            settings=self._settings,
            metrics=self._metrics,
            trip_logger=self._logger,
        )

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def validate_request(self, request: MultiCityGenerationRequest) -> None:
        """Reject requests the pipeline cannot plan.

        Raises:
            TripValidationError: too few cities, too short or too long
        """
        if len(request.cities) < self._settings.min_cities:
            raise TripValidationError(f"At least {self._settings.min_cities} cities are required")

        total_days = (request.end_date - request.start_date).days
        if total_days < len(request.cities):
            raise TripValidationError(f"Trip is too short for {len(request.cities)} cities")

        if total_days > self._settings.max_trip_days:
            raise TripValidationError(f"Trip cannot exceed {self._settings.max_trip_days} days")

    async def generate_multi_city_trip(self, request: MultiCityGenerationRequest) -> MultiCityResult:
        """Build a complete trip from a generation request."""
        return await self._run("generate", lambda: self._generate(request))

    async def _generate(self, request: MultiCityGenerationRequest) -> MultiCityResult:
        self.validate_request(request)

        start_city = request.start_city or request.cities[0]
        end_city = start_city if request.return_to_start else request.end_city

        sequence = sequence_cities(request.cities, start_city, end_city)
        if not sequence.complete:
            missing = ", ".join(city.name for city in sequence.skipped)
            raise SequencingError(f"Failed to sequence cities: could not reach {missing}")

        allocations = allocate_nights(
            sequence.cities,
            request.start_date,
            request.end_date,
            request.preferences,
            return_to_start=request.return_to_start,
        )
        stops = build_city_stops(allocations, return_to_start=request.return_to_start)
        transitions = await self._plan_transitions(request, stops)
        city_itineraries = build_city_itineraries(stops, transitions, self._settings)
        stats = compute_trip_stats(stops, transitions, city_itineraries, self._settings)

        violations: list[Violation] = []
        violations += verify_night_allocation(
            [s for s in stops if not s.is_return],
            request.end_date,
            available_nights(
                len(sequence.cities),
                request.start_date,
                request.end_date,
                return_to_start=request.return_to_start,
            ),
        )
        violations += verify_transitions(transitions)
        violations += verify_transport_budget(request.preferences, stats)

        now = datetime.now(UTC)
        trip = MultiCityTrip(
            id=f"mct_{uuid.uuid4().hex[:12]}",
            name=trip_name(stops),
            status=TripStatus.planned,
            created_at=now,
            last_modified_at=now,
            travelers=request.travelers,
            preferences=request.preferences,
            return_to_start=request.return_to_start,
            stops=stops,
            transitions=transitions,
            city_itineraries=city_itineraries,
            stats=stats,
        )
        return MultiCityResult(success=True, trip=trip, warnings=[v.message for v in violations])

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def _rebuild(
        self,
        trip: MultiCityTrip,
        visits: list[tuple[CityDestination, int]],
        return_to_start: bool,
        itineraries: dict[str, CityItinerary],
        new_city_index: int | None = None,
    ) -> MultiCityResult:
        """Re-derive dates, transitions and stats from a new visit list.

        Dates restart from the trip's original first arrival date; for an
        untouched prefix this reproduces the existing dates.
        """
        stops = layout_stops(visits, trip.stops[0].arrival_date, return_to_start=return_to_start)
        transitions = await self._plan_transitions(trip, stops)

        # Deep copies: the input trip must not share day schedules with the result
        itineraries = {city_id: it.model_copy(deep=True) for city_id, it in itineraries.items()}
        if new_city_index is not None:
            new_stop = stops[new_city_index]
            arrival_leg, departure_leg = legs_for_stop(new_city_index, transitions)
            itineraries[new_stop.city.id] = build_city_itinerary(
                new_stop, arrival_leg, departure_leg, self._settings
            )

        stats = compute_trip_stats(stops, transitions, itineraries, self._settings)
        violations = verify_transitions(transitions) + verify_transport_budget(trip.preferences, stats)

        updated = trip.model_copy(
            update={
                "name": trip_name(stops),
                "return_to_start": return_to_start,
                "stops": stops,
                "transitions": transitions,
                "city_itineraries": itineraries,
                "stats": stats,
                "last_modified_at": datetime.now(UTC),
            }
        )
        return MultiCityResult(success=True, trip=updated, warnings=[v.message for v in violations])

    async def add_city(
        self,
        trip: MultiCityTrip,
        city: CityDestination,
        after_stop_index: int,
        nights: int,
    ) -> MultiCityResult:
        """Insert a city after a stop; later stops shift by the new stay.

        Only the new city gets a day skeleton; existing itineraries are kept.
        """

        async def op() -> MultiCityResult:
            if not 0 <= after_stop_index < len(trip.stops):
                raise TripStructureError(f"Stop index {after_stop_index} is out of range")
            if trip.stops[after_stop_index].is_return:
                raise TripStructureError("Cannot add a city after the return to the origin")
            if nights < 1:
                raise TripStructureError("A new city needs at least 1 night")
            if any(stop.city.id == city.id for stop in trip.stops):
                raise TripStructureError(f"{city.name} is already part of this trip")

            visits = [(stop.city, stop.nights) for stop in trip.visit_stops]
            insert_index = after_stop_index + 1
            visits.insert(insert_index, (city, nights))

            return await self._rebuild(
                trip,
                visits,
                trip.return_to_start,
                trip.city_itineraries,
                new_city_index=insert_index,
            )

        return await self._run("add_city", op)

    async def remove_city(self, trip: MultiCityTrip, stop_index: int) -> MultiCityResult:
        """Remove a stop; a trip keeps at least 2 cities.

        Removing the return stop turns a round trip into a one-way trip.
        """

        async def op() -> MultiCityResult:
            if len(trip.stops) <= 2:
                raise TripStructureError("Cannot remove city - trip must have at least 2 cities")
            if not 0 <= stop_index < len(trip.stops):
                raise TripStructureError(f"Stop index {stop_index} is out of range")

            removed = trip.stops[stop_index]
            visits = [(stop.city, stop.nights) for stop in trip.visit_stops]

            if removed.is_return:
                return await self._rebuild(trip, visits, False, trip.city_itineraries)

            if len(visits) <= 2:
                raise TripStructureError("Cannot remove city - trip must have at least 2 cities")

            del visits[stop_index]
            itineraries = dict(trip.city_itineraries)
            if all(city.id != removed.city.id for city, _ in visits):
                itineraries.pop(removed.city.id, None)

            return await self._rebuild(trip, visits, trip.return_to_start, itineraries)

        return await self._run("remove_city", op)

    async def reorder_cities(
        self, trip: MultiCityTrip, from_index: int, to_index: int
    ) -> MultiCityResult:
        """Move a stop within the visit order.

        Nights per city are kept; dates are re-derived from the first stop's
        original arrival date. The return stop always stays last.
        """

        async def op() -> MultiCityResult:
            visits = [(stop.city, stop.nights) for stop in trip.visit_stops]
            for index in (from_index, to_index):
                if not 0 <= index < len(visits):
                    raise TripStructureError(f"Stop index {index} is out of range")

            moved = visits.pop(from_index)
            visits.insert(to_index, moved)

            return await self._rebuild(trip, visits, trip.return_to_start, trip.city_itineraries)

        return await self._run("reorder_cities", op)


@lru_cache
def get_multi_city_orchestrator() -> MultiCityOrchestrator:
    """Shared orchestrator wired with Prometheus metrics."""
    return MultiCityOrchestrator(metrics=PrometheusTripMetrics())
