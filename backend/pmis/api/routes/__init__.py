"""Route Modules — one file per resource family.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never touch backend internals; they call Storage repositories

Design Decisions:
    - Explicit registration in main.py over auto-discovery
    - Shared lookup/validation helpers in route_helpers.py
"""
