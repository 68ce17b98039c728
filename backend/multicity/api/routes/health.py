"""Health check endpoint."""

from fastapi import APIRouter

from backend.multicity.adapters.catalog import list_destinations

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz")
async def healthz() -> dict[str, object]:
    """Health check including reference data availability."""
    destinations = list_destinations()
    return {
        "status": "ok" if destinations else "degraded",
        "components": {"catalog": f"{len(destinations)} destinations"},
    }
