"""Services Layer — orchestration between routes and repositories.

Invariants:
    - Services speak wire schemas outward and Entity Records inward
    - Routes never touch repositories directly

Design Decisions:
    - One generic CrudService instantiated per kind from a ResourceDefinition
"""
