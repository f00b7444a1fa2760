"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions here are deterministic given their inputs

Design Decisions:
    - Functional core separated from imperative shell: storage and HTTP live outside
"""
