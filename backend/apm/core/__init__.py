"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Records, pagination, merge and identity rules live here and are reused by every entity kind
"""
