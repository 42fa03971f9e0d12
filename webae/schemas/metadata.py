"""Metadata Schemas — transfer object used at the REST boundary.

Invariants:
    - MetadataDTO mirrors the entity field-for-field (id, title)
    - id is optional: absent on create, present on update; bounded to BIGINT
    - Equality by id only, like the entity

Design Decisions:
    - from_attributes=True: the mapper builds DTOs straight from ORM instances
"""

from pydantic import BaseModel, ConfigDict, Field

from webae.core.domain_types import MAX_METADATA_ID, MIN_METADATA_ID


class MetadataDTO(BaseModel):
    """A DTO for the Metadata entity."""
    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(None, ge=MIN_METADATA_ID, le=MAX_METADATA_ID)
    title: str | None = Field(None, max_length=255)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, MetadataDTO):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
