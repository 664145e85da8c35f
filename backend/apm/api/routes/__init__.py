"""Route Modules — one file per concern.

Invariants:
    - Each module exposes an APIRouter (or a builder returning one) with prefix and tags
    - Routes never contain business logic (delegate to services)
"""
