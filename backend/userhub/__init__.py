"""UserHub Application Package — minimal JSON API: welcome, health, users.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
