"""Common types and enums shared across all models."""

from datetime import datetime, time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Geo(BaseModel):
    """Geographic coordinates (WGS84)."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class TimeWindow(BaseModel):
    """Time window in local time."""

    start: time
    end: time


class Money(BaseModel):
    """Monetary amount in whole currency units."""

    model_config = ConfigDict(frozen=True)

    amount: int = Field(..., ge=0)
    currency: str = "USD"


class CarbonFootprint(BaseModel):
    """CO2 emitted by a leg, all passengers included."""

    model_config = ConfigDict(frozen=True)

    kg_co2: float = Field(..., ge=0)


class TransportMode(str, Enum):
    """Inter-city transport mode."""

    flight = "flight"
    train = "train"
    bus = "bus"
    ferry = "ferry"
    car_rental = "car_rental"
    private_transfer = "private_transfer"


class CarrierType(str, Enum):
    """Kind of operator running a leg."""

    airline = "airline"
    rail_operator = "rail_operator"
    bus_company = "bus_company"
    ferry_company = "ferry_company"
    car_rental = "car_rental"


class DayType(str, Enum):
    """Position of a day within a city stay."""

    arrival = "arrival"
    full = "full"
    departure = "departure"


class TripStatus(str, Enum):
    """Trip lifecycle status."""

    draft = "draft"
    planned = "planned"
    booked = "booked"
    in_progress = "in_progress"
    completed = "completed"


class Provenance(BaseModel):
    """Provenance metadata for synthesized data."""

    model_config = ConfigDict(frozen=True)

    source: str  # e.g. "tool.estimate.flight"
    ref_id: str | None = None
    source_url: str | None = None
    fetched_at: datetime
    cache_hit: bool | None = None
