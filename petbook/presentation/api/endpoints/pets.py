"""JSON endpoints for reading and writing cats and dogs."""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from petbook.application.schemas import (
    CatResponse,
    DogResponse,
    ErrorResponse,
    NameResponse,
    parse_pet_create,
)
from petbook.application.services import PetService
from petbook.domain.entities import Cat
from petbook.domain.exceptions import EntityNotFoundError, ValidationError
from petbook.infrastructure.dependencies import get_pet_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pets"])

SEARCH_NAME_REQUIRED = "Name is required to perform a search"

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


# ── Helpers ──────────────────────────────────────────────────────────


async def _read_fields(request: Request) -> dict[str, Any]:
    """Collect body fields from a JSON or form-encoded request."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except json.JSONDecodeError as exc:
            raise ValidationError("Request body is not valid JSON", [str(exc)]) from exc
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")
        return body
    form = await request.form()
    return dict(form)


# ── Endpoints ────────────────────────────────────────────────────────


@router.get("/getName", response_model=NameResponse)
async def get_name(service: PetService = Depends(get_pet_service)) -> NameResponse:
    """Name of the last added record."""
    return NameResponse(name=service.last_added.name)


@router.get("/findCat", response_model=CatResponse | ErrorResponse, responses=_ERROR_RESPONSES)
async def find_cat(
    name: str | None = Query(None, description="Exact cat name"),
    service: PetService = Depends(get_pet_service),
) -> CatResponse | ErrorResponse:
    """Look a cat up by name. Misses are reported in the body, not the status."""
    if not name:
        return ErrorResponse(error=SEARCH_NAME_REQUIRED)
    try:
        cat = await service.find_cat(name)
    except EntityNotFoundError:
        return ErrorResponse(error="No cats found")
    return CatResponse.from_entity(cat)


@router.get("/findDog", response_model=DogResponse | ErrorResponse, responses=_ERROR_RESPONSES)
async def find_dog(
    name: str | None = Query(None, description="Exact dog name"),
    service: PetService = Depends(get_pet_service),
) -> DogResponse | ErrorResponse:
    """Look a dog up by name and age it by one year."""
    if not name:
        return ErrorResponse(error=SEARCH_NAME_REQUIRED)
    try:
        dog = await service.find_and_age_dog(name)
    except EntityNotFoundError:
        return ErrorResponse(error="No dogs found")
    return DogResponse.from_entity(dog)


@router.post("/setName", response_model=CatResponse | DogResponse, responses=_ERROR_RESPONSES)
async def set_name(
    request: Request,
    service: PetService = Depends(get_pet_service),
) -> CatResponse | DogResponse:
    """Create a cat or a dog from the posted fields.

    The record kind comes from an explicit ``kind`` field, or from the
    presence of ``beds`` (cat) or ``age`` (dog).
    """
    data = parse_pet_create(await _read_fields(request))
    record = await service.create_pet(data)
    if isinstance(record, Cat):
        return CatResponse.from_entity(record)
    return DogResponse.from_entity(record)


@router.post("/updateLast", response_model=CatResponse, responses=_ERROR_RESPONSES)
async def update_last(service: PetService = Depends(get_pet_service)) -> CatResponse:
    """Give the last added cat one more bed."""
    cat = await service.update_last()
    return CatResponse.from_entity(cat)
