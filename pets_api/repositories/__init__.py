"""
Repositories package - Persistence Store implementations for pet records
"""

from pets_api.repositories.base import PetRepository
from pets_api.repositories.memory_repository import InMemoryPetRepository
from pets_api.repositories.sqlalchemy_repository import SqlAlchemyPetRepository

__all__ = ["PetRepository", "InMemoryPetRepository", "SqlAlchemyPetRepository"]
