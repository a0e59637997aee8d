"""
Pets API — Pet Route Handlers
===============================

What:  The four /api/pets endpoints used by the mobile client.
Why:   Entry point for creating, listing, fetching, and deleting pets.
How:   Parses the request, delegates to PetService, returns JSON.
       Errors are raised as exceptions and turned into responses by the
       handlers registered in main.py.

Endpoint Summary:
    POST   /api/pets                  → 201 record      | 400 missing field
    GET    /api/pets?ownerEmail=<e>   → 200 [records]   | 400 empty/missing ownerEmail
    GET    /api/pets/{id}             → 200 record      | 404
    DELETE /api/pets/{id}             → 204 no body     | 404
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status

from pets_api.dependencies import get_pet_service
from pets_api.schemas.common import ErrorResponse
from pets_api.schemas.pet import PetCreate, PetRecord
from pets_api.services.pet_service import PetService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Pets"])


@router.post(
    "/pets",
    status_code=status.HTTP_201_CREATED,
    response_model=PetRecord,
    responses={
        201: {"description": "Pet stored", "model": PetRecord},
        400: {"description": "name, type or ownerEmail missing or null", "model": ErrorResponse},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="Create a pet",
    description=(
        "Stores a pet and returns it with its assigned id. name, type and ownerEmail "
        "must be present and non-null; empty strings are accepted. Any id in the body "
        "is ignored."
    ),
)
async def create_pet(
    payload: Optional[PetCreate] = Body(default=None),
    service: PetService = Depends(get_pet_service),
) -> PetRecord:
    # A missing body is treated like a body with every field absent → 400
    return await service.create(payload or PetCreate())


@router.get(
    "/pets",
    response_model=List[PetRecord],
    responses={
        200: {"description": "Pets owned by the given email (possibly empty)"},
        400: {"description": "ownerEmail missing or empty", "model": ErrorResponse},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="List pets by owner email",
)
async def list_pets(
    owner_email: Optional[str] = Query(
        default=None,
        alias="ownerEmail",
        description="Exact owner email to match. Not validated as an email address.",
    ),
    user_email: Optional[str] = Query(
        default=None,
        alias="userEmail",
        include_in_schema=False,
    ),
    service: PetService = Depends(get_pet_service),
) -> List[PetRecord]:
    """
    List every pet registered under an owner email.

    `userEmail` is the parameter name older mobile builds send; it is only
    consulted when `ownerEmail` is absent.
    """
    return await service.list_by_owner(
        owner_email if owner_email is not None else user_email
    )


@router.get(
    "/pets/{pet_id}",
    response_model=PetRecord,
    responses={
        200: {"description": "The pet", "model": PetRecord},
        404: {"description": "No pet with this id", "model": ErrorResponse},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="Get a pet by id",
)
async def get_pet(
    pet_id: int,
    service: PetService = Depends(get_pet_service),
) -> PetRecord:
    return await service.get_by_id(pet_id)


@router.delete(
    "/pets/{pet_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        204: {"description": "Pet deleted"},
        404: {"description": "No pet with this id", "model": ErrorResponse},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="Delete a pet by id",
)
async def delete_pet(
    pet_id: int,
    service: PetService = Depends(get_pet_service),
) -> Response:
    await service.delete_by_id(pet_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
