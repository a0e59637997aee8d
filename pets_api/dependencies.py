"""
Pets API — Request Dependencies
=================================

What:  Builds the PetRepository and PetService for each request.
Why:   The service takes its store as a constructor argument; this module is
       the single place that decides which store that is.
How:   STORAGE_BACKEND=sqlalchemy → a SqlAlchemyPetRepository bound to a
       fresh request-scoped session (committed/rolled back by session_scope).
       STORAGE_BACKEND=memory     → the process-wide InMemoryPetRepository.

The repository dependency is declared with scope="function": its exit code
(the commit) runs when the endpoint returns, before the response is sent.
A 201 or 204 is therefore only returned for a committed write.

Tests swap the store with `app.dependency_overrides[get_pet_repository]`.
"""

from typing import AsyncGenerator

from fastapi import Depends

from pets_api.config import settings
from pets_api.database import session_scope
from pets_api.repositories.base import PetRepository
from pets_api.repositories.memory_repository import InMemoryPetRepository
from pets_api.repositories.sqlalchemy_repository import SqlAlchemyPetRepository
from pets_api.services.pet_service import PetService

memory_pet_repository = InMemoryPetRepository()


async def get_pet_repository() -> AsyncGenerator[PetRepository, None]:
    if settings.storage_backend == "memory":
        yield memory_pet_repository
        return
    async with session_scope() as session:
        yield SqlAlchemyPetRepository(session)


def get_pet_service(
    repository: PetRepository = Depends(get_pet_repository, scope="function"),
) -> PetService:
    return PetService(repository)
