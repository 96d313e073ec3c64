"""Status Payloads — pure builders for the root and health responses.

Invariants:
    - Root status is always "running", health status always "healthy"
    - The clock is an argument: nothing here reads the wall clock
"""

from datetime import datetime

SERVER_RUNNING = "running"
HEALTHY = "healthy"


def build_server_status(message: str) -> dict:
    return {"message": message, "status": SERVER_RUNNING}


def build_health(now: datetime) -> dict:
    """Liveness payload stamped with the caller-supplied time."""
    return {"status": HEALTHY, "timestamp": now}
