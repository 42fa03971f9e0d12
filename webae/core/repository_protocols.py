"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Persistence accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO
"""

from typing import Protocol, Sequence

from webae.core.domain_types import MetadataId


class MetadataLike(Protocol):
    """Structural contract for Metadata records passed between layers.

    Avoids coupling the mapper and service to the ORM model while giving mypy
    real type information (unlike Any).
    """
    id: int | None
    title: str | None


class MetadataRepository(Protocol):
    """Contract for Metadata persistence — implemented by shell."""
    async def save(self, record: MetadataLike) -> MetadataLike: ...
    async def find_all(self) -> Sequence[MetadataLike]: ...
    async def find_one(self, metadata_id: MetadataId) -> MetadataLike | None: ...
    async def delete(self, metadata_id: MetadataId) -> None: ...
