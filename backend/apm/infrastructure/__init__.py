"""Infrastructure Layer — IO adapters: database sessions, repositories, logging, security.

Invariants:
    - Everything that touches the database, the clock-dependent token signer or
      the log handlers lives here; core/ stays pure
"""
