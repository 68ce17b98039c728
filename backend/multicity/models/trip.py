"""Trip models - stops, per-city schedules, stats and the trip aggregate."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from backend.multicity.models.city import CityDestination
from backend.multicity.models.common import CarbonFootprint, DayType, Money, TimeWindow, TripStatus
from backend.multicity.models.preferences import MultiCityPreferences, TravelerInfo
from backend.multicity.models.transport import AnyLeg


class CityNightsAllocation(BaseModel):
    """Nights assigned to one city, with its dates."""

    model_config = ConfigDict(frozen=True)

    city: CityDestination
    nights: int = Field(..., ge=0)
    arrival_date: date
    departure_date: date


class CityStop(BaseModel):
    """A scheduled visit to one city.

    nights == (departure_date - arrival_date).days. A return stop closes a
    round trip at the origin: 0 nights and no itinerary of its own.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    city: CityDestination
    arrival_date: date
    departure_date: date
    nights: int = Field(..., ge=0)
    is_origin: bool
    is_final_destination: bool
    is_return: bool = False
    order: int = Field(..., ge=0)


class CityDaySchedule(BaseModel):
    """One day in a city; activities and meals are filled in elsewhere."""

    date: date
    day_number: int = Field(..., ge=1)
    day_type: DayType
    available_hours: TimeWindow
    activities: list[dict[str, Any]] = Field(default_factory=list)
    meals: list[dict[str, Any]] = Field(default_factory=list)


class CityItinerary(BaseModel):
    """Day skeleton for one city stay."""

    city_id: str
    city_name: str
    start_date: date
    end_date: date
    days: list[CityDaySchedule]


class MultiCityTripStats(BaseModel):
    """Aggregate trip statistics; always recomputed, never edited."""

    model_config = ConfigDict(frozen=True)

    total_days: int = 0
    total_cities: int = 0
    total_nights: int = 0
    total_flight_minutes: int = 0
    total_train_minutes: int = 0
    total_transit_minutes: int = 0
    total_activities: int = 0
    estimated_transport_cost: Money = Field(default_factory=lambda: Money(amount=0))
    carbon_footprint: CarbonFootprint = Field(default_factory=lambda: CarbonFootprint(kg_co2=0))
    countries_visited: list[str] = Field(default_factory=list)
    timezones: list[str] = Field(default_factory=list)
    timezones_traversed: int = 0


class MultiCityTrip(BaseModel):
    """Aggregate root for a multi-city trip.

    Replaced, never patched: every mutation returns a new trip with dates,
    transitions and stats recomputed from the stop list.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    status: TripStatus = TripStatus.planned
    created_at: datetime
    last_modified_at: datetime
    travelers: TravelerInfo
    preferences: MultiCityPreferences
    return_to_start: bool = False
    stops: list[CityStop]
    transitions: list[AnyLeg]
    city_itineraries: dict[str, CityItinerary]
    stats: MultiCityTripStats

    @property
    def visit_stops(self) -> list[CityStop]:
        """Stops excluding the closing return stop."""
        return [s for s in self.stops if not s.is_return]


class MultiCityGenerationRequest(BaseModel):
    """Input for generating a trip.

    City count and trip length are checked by the orchestrator so that
    violations surface in the result envelope.
    """

    cities: list[CityDestination]
    start_date: date
    end_date: date
    start_city: CityDestination | None = None
    end_city: CityDestination | None = None
    travelers: TravelerInfo = Field(default_factory=TravelerInfo)
    preferences: MultiCityPreferences = Field(default_factory=MultiCityPreferences)
    return_to_start: bool = False


class MultiCityResult(BaseModel):
    """Envelope returned by every orchestrator operation."""

    success: bool
    trip: MultiCityTrip | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)
