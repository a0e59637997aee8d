"""
Pets API — SQLAlchemy Pet Repository
======================================

What:  PetRepository implementation backed by the `pets` table.
Why:   Production storage; the row ↔ record mapping is spelled out in
       `_to_record()` instead of returning ORM objects to the service.
How:   Uses the request-scoped AsyncSession. Writes are flushed (so the id is
       assigned) but never committed here; session_scope() in
       pets_api.database commits on success and rolls back on error.

Query plans:
    find_by_id:          SELECT ... WHERE id = :id          → primary key
    find_by_owner_email: SELECT ... WHERE user_email = :e   → idx_pets_user_email
    exists_by_id:        SELECT 1 ... WHERE id = :id LIMIT 1
    delete_by_id:        DELETE FROM pets WHERE id = :id
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pets_api.exceptions import DatabaseError
from pets_api.models.pet import Pet
from pets_api.repositories.base import PetRepository
from pets_api.schemas.pet import PetRecord

logger = logging.getLogger(__name__)

# pets.id is INTEGER (SERIAL). Ids outside int4 cannot exist, and PostgreSQL
# rejects them as a query error rather than matching no row
INT4_MIN = -(2 ** 31)
INT4_MAX = 2 ** 31 - 1


def _storable_id(pet_id: int) -> bool:
    return INT4_MIN <= pet_id <= INT4_MAX


def _to_record(row: Pet) -> PetRecord:
    return PetRecord(
        id=row.id,
        name=row.name,
        type=row.type,
        owner_email=row.owner_email,
    )


class SqlAlchemyPetRepository(PetRepository):
    """
    Store backed by async SQLAlchemy.

    Error Handling Strategy:
        Every SQLAlchemyError is logged with the failing operation and
        re-raised as DatabaseError. There is no retry; the error handler
        answers 500 and the session dependency rolls the transaction back.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, name: str, type: str, owner_email: str) -> PetRecord:
        row = Pet(name=name, type=type, owner_email=owner_email)
        try:
            self.session.add(row)
            await self.session.flush()  # Assigns the SERIAL id without committing
        except SQLAlchemyError as e:
            raise self._storage_fault("insert", e)
        return _to_record(row)

    async def find_by_id(self, pet_id: int) -> Optional[PetRecord]:
        if not _storable_id(pet_id):
            return None
        try:
            result = await self.session.execute(select(Pet).where(Pet.id == pet_id))
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._storage_fault("find_by_id", e, pet_id=pet_id)
        return _to_record(row) if row is not None else None

    async def find_by_owner_email(self, owner_email: str) -> List[PetRecord]:
        try:
            result = await self.session.execute(
                select(Pet).where(Pet.owner_email == owner_email).order_by(Pet.id)
            )
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            raise self._storage_fault("find_by_owner_email", e)
        return [_to_record(row) for row in rows]

    async def exists_by_id(self, pet_id: int) -> bool:
        if not _storable_id(pet_id):
            return False
        try:
            result = await self.session.execute(
                select(Pet.id).where(Pet.id == pet_id).limit(1)
            )
            found = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._storage_fault("exists_by_id", e, pet_id=pet_id)
        return found is not None

    async def delete_by_id(self, pet_id: int) -> None:
        if not _storable_id(pet_id):
            return
        try:
            await self.session.execute(delete(Pet).where(Pet.id == pet_id))
            await self.session.flush()
        except SQLAlchemyError as e:
            raise self._storage_fault("delete_by_id", e, pet_id=pet_id)

    @staticmethod
    def _storage_fault(operation: str, error: Exception, **context) -> DatabaseError:
        logger.error(
            "Database error in %s: %s", operation, str(error), exc_info=True
        )
        return DatabaseError(
            context={
                "operation": operation,
                "error_type": type(error).__name__,
                **context,
            },
        )
