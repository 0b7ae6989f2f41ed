"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    edge_cache: str = Field(
        default="disabled",
        description="Edge tier state: connected, unavailable or disabled",
    )
