"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error bodies have the shape {"error": message}

Design Decisions:
    - Thin routes: validate, delegate to Storage, serialize
"""
