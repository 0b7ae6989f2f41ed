"""Health check endpoint. Used for liveness probes; reports edge tier state."""

from fastapi import APIRouter, Request

from isp_translator.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Return ok status for liveness plus the edge cache state."""
    edge_cache = getattr(request.app.state, "edge_cache", None)
    if edge_cache is None:
        edge_state = "disabled"
    elif edge_cache.is_available():
        edge_state = "connected"
    else:
        edge_state = "unavailable"
    return HealthResponse(edge_cache=edge_state)
