"""Pydantic Schemas — response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (API responses)
    - Payload dicts come from core/; schemas never build data themselves
"""
