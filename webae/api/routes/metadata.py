"""Metadata Resource — REST endpoints for Metadata records and the embedded form schemas.

Invariants:
    - POST rejects bodies that already carry an id (400, error.idexists)
    - PUT without id behaves exactly like POST (201, creation alert)
    - DELETE answers 200 whether or not the record existed
    - Form schema documents are returned byte-for-byte as embedded
    - Literal /metadata/<code> routes are declared before /metadata/{metadata_id}
    - Ids outside the BIGINT range are rejected with 400 before reaching the database

Design Decisions:
    - PUT-without-id falls back to create: kept for client compatibility with the
      generated REST contract this API replaces
    - Schema routes declared one per code: a templated {code} segment would
      swallow /metadata/{metadata_id} and fail validation instead of falling through
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from webae.config import get_settings
from webae.core.alert_headers import create_entity_alert
from webae.core.domain_types import (
    MAX_METADATA_ID, METADATA_ENTITY_NAME, MIN_METADATA_ID,
    EntityAction, FormSchemaCode, MetadataId,
)
from webae.core.errors import BadRequestAlertError, ResourceNotFoundError
from webae.infrastructure.database import get_db
from webae.schemas.metadata import MetadataDTO
from webae.services.form_schemas import load_form_schema
from webae.services.metadata_service import MetadataService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["metadata"])


def get_metadata_service(db: AsyncSession = Depends(get_db)) -> MetadataService:
    return MetadataService(db)


def _entity_alert(action: EntityAction, metadata_id: int) -> dict[str, str]:
    return create_entity_alert(
        get_settings().application_name, METADATA_ENTITY_NAME,
        action, str(metadata_id),
    )


async def _create(
    body: MetadataDTO, response: Response, service: MetadataService,
) -> MetadataDTO:
    if body.id is not None:
        raise BadRequestAlertError(
            "A new metadata cannot already have an ID",
            METADATA_ENTITY_NAME, "idexists",
        )
    result = await service.save(body)
    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = f"/api/metadata/{result.id}"
    response.headers.update(_entity_alert(EntityAction.CREATED, result.id))
    return result


def _form_schema_response(code: FormSchemaCode) -> Response:
    logger.debug(
        f"REST request to get form schema : {code.value}",
        extra={"schema_code": code.value},
    )
    return Response(
        content=load_form_schema(code), media_type="application/json",
    )


# ─── Form schemas (literal paths, before /metadata/{metadata_id}) ─

@router.get("/metadata/ace")
async def get_metadata_ace():
    """Activité de l'établissement: activity codes and labels."""
    return _form_schema_response(FormSchemaCode.ACE)


@router.get("/metadata/cae")
async def get_metadata_cae():
    """Conditions d'activité: permanence, periods, nature of activity."""
    return _form_schema_response(FormSchemaCode.CAE)


@router.get("/metadata/adf")
async def get_metadata_adf():
    """Adresse de correspondance: recipient, address and contact fields."""
    return _form_schema_response(FormSchemaCode.ADF)


@router.post("/metadata/adf")
async def validate_metadata_adf(body: Any = Body(...)):
    """Accept an ADF form submission and echo it back unchanged."""
    logger.debug(f"REST request to validate ADF form : {body!r}")
    return JSONResponse(content=body)


# ─── Metadata CRUD ──────────────────────────────────────────────

@router.post(
    "/metadata", response_model=MetadataDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_metadata(
    body: MetadataDTO,
    response: Response,
    service: MetadataService = Depends(get_metadata_service),
):
    """Create a new metadata."""
    logger.debug(f"REST request to save Metadata : {body!r}")
    return await _create(body, response, service)


@router.put("/metadata", response_model=MetadataDTO)
async def update_metadata(
    body: MetadataDTO,
    response: Response,
    service: MetadataService = Depends(get_metadata_service),
):
    """Update an existing metadata, or create it when the body has no id."""
    logger.debug(f"REST request to update Metadata : {body!r}")
    if body.id is None:
        return await _create(body, response, service)
    result = await service.save(body)
    response.headers.update(_entity_alert(EntityAction.UPDATED, body.id))
    return result


@router.get("/metadata", response_model=list[MetadataDTO])
async def get_all_metadata(
    service: MetadataService = Depends(get_metadata_service),
):
    logger.debug("REST request to get all Metadata")
    return await service.find_all()


@router.get("/metadata/{metadata_id}", response_model=MetadataDTO)
async def get_metadata(
    metadata_id: int = Path(ge=MIN_METADATA_ID, le=MAX_METADATA_ID),
    service: MetadataService = Depends(get_metadata_service),
):
    logger.debug(
        f"REST request to get Metadata : {metadata_id}",
        extra={"entity": METADATA_ENTITY_NAME, "entity_id": metadata_id},
    )
    result = await service.find_one(MetadataId(metadata_id))
    if result is None:
        raise ResourceNotFoundError("Metadata", str(metadata_id))
    return result


@router.delete("/metadata/{metadata_id}", status_code=status.HTTP_200_OK)
async def delete_metadata(
    metadata_id: int = Path(ge=MIN_METADATA_ID, le=MAX_METADATA_ID),
    service: MetadataService = Depends(get_metadata_service),
):
    """Delete the metadata; succeeds whether or not it existed."""
    logger.debug(
        f"REST request to delete Metadata : {metadata_id}",
        extra={"entity": METADATA_ENTITY_NAME, "entity_id": metadata_id},
    )
    await service.delete(MetadataId(metadata_id))
    return Response(
        status_code=status.HTTP_200_OK,
        headers=_entity_alert(EntityAction.DELETED, metadata_id),
    )
