"""Status Schemas — response contracts for the root and health endpoints.

Invariants:
    - ServerStatusResponse.status is always "running"
    - HealthResponse.status is always "healthy"; timestamp is timezone-aware
"""

from typing import Literal

from pydantic import AwareDatetime, BaseModel


class ServerStatusResponse(BaseModel):
    """Root welcome payload."""
    message: str
    status: Literal["running"]


class HealthResponse(BaseModel):
    """Liveness payload stamped at request time."""
    status: Literal["healthy"]
    timestamp: AwareDatetime
