"""
Pets API — Abstract Pet Repository Interface
==============================================

What:  Abstract base class defining the contract PetService needs from a store.
Why:   PetService is written against this interface only, so the same rules
       run against PostgreSQL (SqlAlchemyPetRepository) and a dict
       (InMemoryPetRepository) without change.
How:   Concrete implementations inherit from PetRepository and implement
       every abstract method. Rows are converted to PetRecord explicitly by
       each implementation; no ORM object crosses this boundary.
Who:   Called by PetService; constructed per request by get_pet_repository
       in pets_api.dependencies.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from pets_api.schemas.pet import PetRecord


class PetRepository(ABC):
    """
    Persistence Store contract for pet records.

    Contract:
        - Each method is atomic on its own; there are no multi-row invariants
        - Lookups that find nothing return None / [] / False, never raise
        - Storage failures surface as DatabaseError
    """

    @abstractmethod
    async def insert(self, name: str, type: str, owner_email: str) -> PetRecord:
        """
        Persist a new pet and return it with its store-assigned id.

        Callers have already rejected null fields; empty strings are stored
        as given.
        """
        ...

    @abstractmethod
    async def find_by_id(self, pet_id: int) -> Optional[PetRecord]:
        ...

    @abstractmethod
    async def find_by_owner_email(self, owner_email: str) -> List[PetRecord]:
        """
        Return every pet whose owner email equals `owner_email` exactly.

        Returns an empty list (never None) when nothing matches. Order is not
        part of the contract.
        """
        ...

    @abstractmethod
    async def exists_by_id(self, pet_id: int) -> bool:
        ...

    @abstractmethod
    async def delete_by_id(self, pet_id: int) -> None:
        """
        Remove the pet with `pet_id` if present.

        Idempotent: deleting a missing id is a no-op here. PetService checks
        existence first so the API can answer 404.
        """
        ...
