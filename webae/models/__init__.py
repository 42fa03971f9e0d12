"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is populated before
      create_all / alembic autogenerate runs
"""

from webae.models.metadata import Metadata  # noqa: F401
