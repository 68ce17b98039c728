"""Multi-city trip endpoints.

Stateless: trips travel in request and response bodies, nothing is stored.
Planning failures come back as a MultiCityResult with success=False.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from backend.multicity.adapters.catalog import list_destinations
from backend.multicity.models.city import CityDestination
from backend.multicity.models.transport import TransportSearchRequest, TransportSearchResult
from backend.multicity.models.trip import (
    MultiCityGenerationRequest,
    MultiCityResult,
    MultiCityTrip,
)
from backend.multicity.orchestration.orchestrator import (
    MultiCityOrchestrator,
    get_multi_city_orchestrator,
)
from backend.multicity.transport.search import search_transport_options

router = APIRouter(prefix="/multi-city", tags=["multi-city"])

Orchestrator = Annotated[MultiCityOrchestrator, Depends(get_multi_city_orchestrator)]


class AddCityRequest(BaseModel):
    """Request body for POST /multi-city/trips/add-city."""

    trip: MultiCityTrip
    city: CityDestination
    after_stop_index: int = Field(..., ge=0)
    nights: int = Field(..., ge=1)


class RemoveCityRequest(BaseModel):
    """Request body for POST /multi-city/trips/remove-city."""

    trip: MultiCityTrip
    stop_index: int = Field(..., ge=0)


class ReorderCitiesRequest(BaseModel):
    """Request body for POST /multi-city/trips/reorder."""

    trip: MultiCityTrip
    from_index: int = Field(..., ge=0)
    to_index: int = Field(..., ge=0)


@router.post("/trips", response_model=MultiCityResult)
async def generate_trip(
    request: MultiCityGenerationRequest, orchestrator: Orchestrator
) -> MultiCityResult:
    """Generate a multi-city trip."""
    return await orchestrator.generate_multi_city_trip(request)


@router.post("/trips/add-city", response_model=MultiCityResult)
async def add_city(request: AddCityRequest, orchestrator: Orchestrator) -> MultiCityResult:
    """Insert a city into an existing trip."""
    return await orchestrator.add_city(
        request.trip, request.city, request.after_stop_index, request.nights
    )


@router.post("/trips/remove-city", response_model=MultiCityResult)
async def remove_city(request: RemoveCityRequest, orchestrator: Orchestrator) -> MultiCityResult:
    """Remove a stop from an existing trip."""
    return await orchestrator.remove_city(request.trip, request.stop_index)


@router.post("/trips/reorder", response_model=MultiCityResult)
async def reorder_cities(
    request: ReorderCitiesRequest, orchestrator: Orchestrator
) -> MultiCityResult:
    """Move a stop within an existing trip."""
    return await orchestrator.reorder_cities(request.trip, request.from_index, request.to_index)


@router.post("/transport/search", response_model=TransportSearchResult)
async def search_transport(request: TransportSearchRequest) -> TransportSearchResult:
    """Transport options between two cities."""
    return search_transport_options(request)


@router.get("/destinations", response_model=list[CityDestination])
async def destinations() -> list[CityDestination]:
    """Known destinations from the reference dataset."""
    return list_destinations()
