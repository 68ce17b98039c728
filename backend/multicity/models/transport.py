"""Inter-city transport models - legs and search envelopes."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from backend.multicity.models.city import AirportInfo, CityDestination, StationInfo
from backend.multicity.models.common import (
    CarbonFootprint,
    CarrierType,
    Money,
    Provenance,
    TransportMode,
)
from backend.multicity.models.preferences import TravelerInfo


class CarrierInfo(BaseModel):
    """Operator of a leg."""

    model_config = ConfigDict(frozen=True)

    name: str
    code: str
    type: CarrierType


class InterCityLeg(BaseModel):
    """A single point-to-point transport segment between two cities.

    Mode-specific subclasses add their own fields. Legs are never mutated
    once created; trips reference them as-is.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    from_city: CityDestination
    to_city: CityDestination
    transport_mode: TransportMode
    departure_time: datetime
    arrival_time: datetime
    duration_minutes: int = Field(..., ge=0)
    carrier: CarrierInfo | None = None
    price: Money | None = None
    carbon_footprint: CarbonFootprint | None = None
    is_placeholder: bool = False
    provenance: Provenance | None = None


class TrainAmenities(BaseModel):
    """On-board amenities for trains."""

    model_config = ConfigDict(frozen=True)

    wifi: bool
    power_outlets: bool
    dining_car: bool
    quiet_car: bool
    accessibility: bool


class BusAmenities(BaseModel):
    """On-board amenities for buses."""

    model_config = ConfigDict(frozen=True)

    wifi: bool
    power_outlets: bool
    restroom: bool
    reclining_seats: bool
    entertainment: bool


class FlightLeg(InterCityLeg):
    """Flight between two airports."""

    flight_number: str
    departure_airport: AirportInfo
    arrival_airport: AirportInfo
    stops: int = 0


class TrainLeg(InterCityLeg):
    """Train between two stations."""

    train_number: str
    train_type: str  # "high_speed" | "intercity"
    departure_station: StationInfo
    arrival_station: StationInfo
    amenities: TrainAmenities


class BusLeg(InterCityLeg):
    """Coach between two bus terminals."""

    bus_number: str
    bus_type: str  # "express" | "overnight"
    departure_terminal: str
    arrival_terminal: str
    amenities: BusAmenities


# Most specific first: a leg payload resolves to the first model it fits.
AnyLeg = FlightLeg | TrainLeg | BusLeg | InterCityLeg


class TransportSearchRequest(BaseModel):
    """Search for transport options between two cities."""

    from_city: CityDestination | str
    to_city: CityDestination | str
    departure_date: date
    travelers: TravelerInfo
    preferred_modes: list[TransportMode] | None = None
    max_price: Money | None = None
    max_duration: int | None = Field(None, gt=0, description="Minutes")
    direct_only: bool = False


class TransportSearchResult(BaseModel):
    """All viable options for a city pair plus the three picks."""

    options: list[AnyLeg] = Field(default_factory=list)
    cheapest: AnyLeg | None = None
    fastest: AnyLeg | None = None
    recommended: AnyLeg | None = None
    searched_at: datetime
