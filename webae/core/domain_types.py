"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - MetadataId wraps the storage-assigned integer key
    - Form schema codes encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: doubles as a FastAPI path value and a resource file stem
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MetadataId = NewType("MetadataId", int)

# BIGINT bounds of the metadata.id column
MIN_METADATA_ID = -(2**63)
MAX_METADATA_ID = 2**63 - 1


# ─── Constants ───────────────────────────────────────────────────

METADATA_ENTITY_NAME = "metadata"


# ─── Enums ───────────────────────────────────────────────────────

class FormSchemaCode(str, Enum):
    """Embedded form schema documents served under /api/metadata/<code>."""
    ACE = "ace"  # activité de l'établissement
    CAE = "cae"  # conditions d'activité de l'établissement
    ADF = "adf"  # adresse de correspondance


class EntityAction(str, Enum):
    """Entity lifecycle events announced through alert headers."""
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
