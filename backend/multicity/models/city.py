"""City reference models - destinations, airports, stations."""

from pydantic import BaseModel, ConfigDict, Field

from backend.multicity.models.common import Geo


class CityDestination(BaseModel):
    """A city that can be part of a multi-city trip.

    Immutable reference data; comes from the destination dataset or is
    supplied directly by the caller.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    country: str
    country_code: str = Field(..., min_length=2, max_length=2)
    coordinates: Geo
    timezone: str = Field(..., description="IANA timezone, e.g., 'Europe/Paris'")
    currency: str
    language: str
    airport_codes: tuple[str, ...] = ()
    train_station_codes: tuple[str, ...] = ()


class AirportInfo(BaseModel):
    """Major airport serving a city."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    city: str


class StationInfo(BaseModel):
    """Major train station serving a city."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    city: str
