"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - timestamp is the UTC wall clock at request time
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

from userhub.core.status import build_health
from userhub.schemas.status import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return build_health(datetime.now(timezone.utc))
