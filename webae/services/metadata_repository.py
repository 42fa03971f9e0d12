"""Metadata Repository — SQLAlchemy implementation of the MetadataRepository protocol.

Invariants:
    - save() never commits; the service owns the transaction
    - save() of a record without id inserts and flushes so the id is assigned
    - save() of a record whose id exists overwrites title; unknown ids insert a new row
    - delete() is a no-op when the id does not exist
    - find_all() ordered by id
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from webae.core.domain_types import MetadataId
from webae.models.metadata import Metadata


class SqlAlchemyMetadataRepository:
    """Metadata persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def save(self, record: Metadata) -> Metadata:
        if record.id is not None:
            existing = await self._db.get(Metadata, record.id)
            if existing is not None:
                existing.title = record.title
                await self._db.flush()
                return existing
        entity = Metadata(title=record.title)
        self._db.add(entity)
        await self._db.flush()
        return entity

    async def find_all(self) -> Sequence[Metadata]:
        result = await self._db.execute(
            select(Metadata).order_by(Metadata.id),
        )
        return result.scalars().all()

    async def find_one(self, metadata_id: MetadataId) -> Metadata | None:
        return await self._db.get(Metadata, metadata_id)

    async def delete(self, metadata_id: MetadataId) -> None:
        entity = await self._db.get(Metadata, metadata_id)
        if entity is None:
            return
        await self._db.delete(entity)
        await self._db.flush()
