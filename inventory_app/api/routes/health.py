from fastapi import APIRouter
from inventory_app.api.deps import READ_METHODS
from inventory_app.schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.api_route("/health", methods=READ_METHODS, response_model=HealthResponse)
async def health():
    """Liveness probe."""
    return HealthResponse(status="ok")
