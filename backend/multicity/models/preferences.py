"""Traveler and preference models - caller-supplied planning inputs."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from backend.multicity.models.common import Money, TransportMode


class TravelerInfo(BaseModel):
    """Party composition.

    Infants travel fare-free but are counted in carbon estimates.
    """

    model_config = ConfigDict(frozen=True)

    adults: int = Field(1, ge=1)
    children: int = Field(0, ge=0)
    infants: int = Field(0, ge=0)

    @property
    def fare_paying(self) -> int:
        return self.adults + self.children

    @property
    def total(self) -> int:
        return self.adults + self.children + self.infants


class MultiCityPreferences(BaseModel):
    """Trip-wide planning preferences."""

    model_config = ConfigDict(frozen=True)

    preferred_transport: list[TransportMode] = Field(default_factory=list)
    prefer_direct_flights: bool = False
    min_nights_per_city: int = Field(1, ge=1)
    max_nights_per_city: int = Field(5, ge=1)
    total_budget: Money | None = None
    transport_budget_percent: float | None = Field(None, gt=0, le=100)

    @model_validator(mode="after")
    def validate_night_bounds(self) -> "MultiCityPreferences":
        """Ensure min_nights_per_city <= max_nights_per_city."""
        if self.min_nights_per_city > self.max_nights_per_city:
            raise ValueError("min_nights_per_city must be <= max_nights_per_city")
        return self
