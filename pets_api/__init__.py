"""
Pets API — Application Package Initializer
============================================

What: Marks the `pets_api` directory as a Python package.
Why:  Enables module imports like `from pets_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The service is a thin layered stack over a single `pets` table:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        PetService (Business Rules)  │  ← Validation, not-found mapping
    ├─────────────────────────────────────┤
    │      PetRepository (Persistence)    │  ← SQLAlchemy or in-memory store
    ├─────────────────────────────────────┤
    │        Database (Sessions/Engine)   │  ← Async SQLAlchemy
    └─────────────────────────────────────┘

    The service receives its repository through the constructor, so the same
    rules run against PostgreSQL in production and a dict in unit tests.
"""

__version__ = "1.0.0"
