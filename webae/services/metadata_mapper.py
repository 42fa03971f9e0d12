"""Metadata Mapper — field copy between the Metadata entity and MetadataDTO.

Invariants:
    - None maps to None in both directions
    - List conversions preserve order
"""

from webae.core.repository_protocols import MetadataLike
from webae.models.metadata import Metadata
from webae.schemas.metadata import MetadataDTO


def to_entity(dto: MetadataDTO | None) -> Metadata | None:
    if dto is None:
        return None
    return Metadata(id=dto.id, title=dto.title)


def to_dto(entity: MetadataLike | None) -> MetadataDTO | None:
    if entity is None:
        return None
    return MetadataDTO.model_validate(entity)


def to_entities(dtos: list[MetadataDTO]) -> list[Metadata]:
    return [to_entity(d) for d in dtos]


def to_dtos(entities) -> list[MetadataDTO]:
    return [to_dto(e) for e in entities]


def from_id(metadata_id: int | None) -> Metadata | None:
    """Reference entity carrying only an id, for relations that point at Metadata."""
    if metadata_id is None:
        return None
    return Metadata(id=metadata_id)
