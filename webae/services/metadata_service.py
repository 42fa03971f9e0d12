"""Metadata Service — save / find-all / find-one / delete over repository + mapper.

Invariants:
    - Every mutating operation commits on success
    - Reads never commit
    - Callers only ever see MetadataDTO, never ORM instances

Design Decisions:
    - Service is the transaction boundary: routes stay thin and the repository
      stays commit-free, so several repository calls can share one commit
    - Rollback on failure is handled by DatabaseSessionManager.session()
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from webae.core.domain_types import MetadataId
from webae.core.repository_protocols import MetadataRepository
from webae.schemas.metadata import MetadataDTO
from webae.services import metadata_mapper
from webae.services.metadata_repository import SqlAlchemyMetadataRepository

logger = logging.getLogger(__name__)


class MetadataService:
    """Service for managing Metadata."""

    def __init__(
        self, db: AsyncSession, repository: MetadataRepository | None = None,
    ):
        self._db = db
        self._repository = repository or SqlAlchemyMetadataRepository(db)

    async def save(self, dto: MetadataDTO) -> MetadataDTO:
        """Persist a metadata and return it with its assigned id."""
        logger.debug(f"Request to save Metadata : {dto!r}")
        entity = metadata_mapper.to_entity(dto)
        entity = await self._repository.save(entity)
        await self._db.commit()
        return metadata_mapper.to_dto(entity)

    async def find_all(self) -> list[MetadataDTO]:
        logger.debug("Request to get all Metadata")
        entities = await self._repository.find_all()
        return metadata_mapper.to_dtos(entities)

    async def find_one(self, metadata_id: MetadataId) -> MetadataDTO | None:
        logger.debug(
            f"Request to get Metadata : {metadata_id}",
            extra={"entity_id": metadata_id},
        )
        entity = await self._repository.find_one(metadata_id)
        return metadata_mapper.to_dto(entity)

    async def delete(self, metadata_id: MetadataId) -> None:
        """Delete the metadata by id. Unknown ids are ignored."""
        logger.debug(
            f"Request to delete Metadata : {metadata_id}",
            extra={"entity_id": metadata_id},
        )
        await self._repository.delete(metadata_id)
        await self._db.commit()
