"""
Pets API — In-Memory Pet Repository
=====================================

Dict-backed PetRepository for unit tests and for running the API locally
without PostgreSQL (STORAGE_BACKEND=memory). Data lives for the lifetime of
the process.

Ids start at 1 and increase monotonically; a deleted id is never handed out
again, matching a SERIAL column.
"""

import itertools
from typing import Dict, List, Optional

from pets_api.repositories.base import PetRepository
from pets_api.schemas.pet import PetRecord


class InMemoryPetRepository(PetRepository):

    def __init__(self):
        self._rows: Dict[int, PetRecord] = {}
        self._ids = itertools.count(1)

    async def insert(self, name: str, type: str, owner_email: str) -> PetRecord:
        record = PetRecord(
            id=next(self._ids),
            name=name,
            type=type,
            owner_email=owner_email,
        )
        self._rows[record.id] = record
        return record

    async def find_by_id(self, pet_id: int) -> Optional[PetRecord]:
        return self._rows.get(pet_id)

    async def find_by_owner_email(self, owner_email: str) -> List[PetRecord]:
        return [r for r in self._rows.values() if r.owner_email == owner_email]

    async def exists_by_id(self, pet_id: int) -> bool:
        return pet_id in self._rows

    async def delete_by_id(self, pet_id: int) -> None:
        self._rows.pop(pet_id, None)

    def __len__(self) -> int:
        return len(self._rows)
