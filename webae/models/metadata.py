"""Metadata ORM — persisted record with a storage-assigned sequential id.

Invariants:
    - id is an auto-assigned BIGINT primary key; unset until first flush
    - title is nullable, at most 255 characters
    - Equality and hash depend on id only; records without an id never compare equal

Design Decisions:
    - BigInteger with an Integer variant on SQLite: SQLite only autoincrements
      INTEGER PRIMARY KEY columns
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from webae.db.base import Base


class Metadata(Base):
    """A Metadata record."""
    __tablename__ = "metadata"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Metadata):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Metadata(id={self.id!r}, title={self.title!r})"
