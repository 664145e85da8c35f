"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All failures return the {error, message, code} envelope

Design Decisions:
    - Thin routes delegate to services from the ServiceContainer on app.state
"""
