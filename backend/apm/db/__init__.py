"""Database Definitions — SQLAlchemy Base and shared column types.

Invariants:
    - Every ORM model derives from db.base.Base
    - Engines and sessions live in infrastructure/database.py, not here

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
