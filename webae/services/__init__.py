"""Services Layer — imperative shell around the Metadata domain.

Invariants:
    - Services own IO (database, embedded resources); core stays pure
    - Routes call services, never repositories directly
"""
