"""FastAPI application - mounts the multi-city engine."""

from fastapi import FastAPI

from backend.multicity.api.routes.health import router as health_router
from backend.multicity.api.routes.metrics import router as metrics_router
from backend.multicity.api.routes.trips import router as trips_router

app = FastAPI(title="Multi-City Trip Engine", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(trips_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Multi-City Trip Engine", "version": "0.1.0"}
