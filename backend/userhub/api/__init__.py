"""API Layer — FastAPI routes and error handlers.

Invariants:
    - All endpoints return structured JSON responses, errors included
"""
