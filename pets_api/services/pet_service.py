"""
Pets API — Pet Service (Business Rules)
=========================================

What:  The Pet Resource Service: validates input and translates store
       outcomes (None / False) into NotFoundError.
Why:   Keeps HTTP concerns in the routes and storage concerns in the
       repository; this layer is testable with an in-memory store.
How:   Receives its PetRepository through the constructor. Owns no state.
Who:   Constructed per request by the route dependency.

Validation policy:
    create():        a field is missing only when it is absent or null.
                     "" is a valid name, type or owner email.
    list_by_owner(): the owner email query value must be present AND
                     non-empty.
    The two checks live in separate functions.

All validation runs before any repository call, so a rejected request never
writes anything.
"""

import logging
from typing import List, Optional

from pets_api.exceptions import NotFoundError, ValidationError
from pets_api.repositories.base import PetRepository
from pets_api.schemas.pet import PetCreate, PetRecord

logger = logging.getLogger(__name__)

# Wire names, used in error messages so the client sees its own keys
REQUIRED_FIELDS = (
    ("name", "name"),
    ("type", "type"),
    ("owner_email", "ownerEmail"),
)


def _require_present(payload: PetCreate) -> None:
    for attr, wire_name in REQUIRED_FIELDS:
        if getattr(payload, attr) is None:
            raise ValidationError(
                message=f"Field '{wire_name}' is required",
                field=wire_name,
            )


def _require_non_empty(owner_email: Optional[str]) -> str:
    if not owner_email:
        raise ValidationError(
            message="Query parameter 'ownerEmail' is required and must not be empty",
            field="ownerEmail",
        )
    return owner_email


class PetService:
    """
    Business logic layer for pet operations.

    Responsibilities:
        - create(): null-field validation, then one insert
        - list_by_owner(): empty-key validation, then one lookup
        - get_by_id(): lookup with not-found handling
        - delete_by_id(): existence check, then one delete

    Storage errors (DatabaseError) are not caught here; they propagate to
    the global handler unchanged.
    """

    def __init__(self, repository: PetRepository):
        self.repository = repository

    async def create(self, payload: PetCreate) -> PetRecord:
        """
        Validate and persist a new pet.

        Args:
            payload: Parsed request body. Any client-supplied id was already
                     dropped by the schema.

        Returns:
            The stored PetRecord, including its newly assigned id.

        Raises:
            ValidationError: name, type or ownerEmail is absent or null (→ 400)
        """
        _require_present(payload)
        record = await self.repository.insert(
            name=payload.name,
            type=payload.type,
            owner_email=payload.owner_email,
        )
        logger.info("Pet %s created (type=%s)", record.id, record.type)
        return record

    async def list_by_owner(self, owner_email: Optional[str]) -> List[PetRecord]:
        """
        Return every pet registered under `owner_email`.

        Raises:
            ValidationError: owner email missing or empty (→ 400)
        """
        owner_email = _require_non_empty(owner_email)
        records = await self.repository.find_by_owner_email(owner_email)
        logger.debug("Found %d pets for owner", len(records))
        return records

    async def get_by_id(self, pet_id: int) -> PetRecord:
        """
        Raises:
            NotFoundError: no pet with this id (→ 404)
        """
        record = await self.repository.find_by_id(pet_id)
        if record is None:
            raise NotFoundError(resource="pet", resource_id=str(pet_id))
        return record

    async def delete_by_id(self, pet_id: int) -> None:
        """
        Delete one pet.

        Existence is checked first; a missing id raises NotFoundError and
        the repository's delete is never called.

        Raises:
            NotFoundError: no pet with this id (→ 404)
        """
        if not await self.repository.exists_by_id(pet_id):
            raise NotFoundError(resource="pet", resource_id=str(pet_id))
        await self.repository.delete_by_id(pet_id)
        logger.info("Pet %s deleted", pet_id)
