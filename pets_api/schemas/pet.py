"""
Pets API — Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the JSON contract with the mobile client.
Why:   Input parsing, response serialization, and OpenAPI doc generation.
How:   FastAPI parses request bodies into PetCreate and serializes PetRecord
       with its camelCase aliases (`ownerEmail`).

Design Decision:
    PetCreate declares every field Optional on purpose. A missing or null
    field must reach PetService and come back as a 400 validation_error,
    not FastAPI's automatic 422. Emptiness is NOT checked here: an empty
    string is a valid name, type or owner email on create.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class PetCreate(BaseModel):
    """
    What:  Body of POST /api/pets.
    Who:   Sent by the mobile client when the user registers a pet.

    Accepted keys:
        name, type, ownerEmail
        userEmail   — legacy alias of ownerEmail used by older app builds;
                      ownerEmail wins when both are present
        id          — ignored; the store assigns identifiers
    """
    name: Optional[str] = Field(default=None, description="Pet name (required, may be empty)")
    type: Optional[str] = Field(
        default=None,
        description="Free-form category, e.g. 'dog' or 'cat' (required, may be empty)",
    )
    owner_email: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("ownerEmail", "userEmail", "owner_email"),
        description="Owner key; opaque string, not validated as an email address",
    )

    model_config = {"extra": "ignore"}


class PetRecord(BaseModel):
    """
    What:  A stored pet as returned by the Persistence Store and the API.
    Who:   Returned by every PetRepository read and by the /api/pets endpoints.

    JSON shape:
        {"id": 1, "name": "Rex", "type": "dog", "ownerEmail": "u@example.com"}
    """
    id: Optional[int] = Field(default=None, description="Store-assigned identifier")
    name: str = Field(description="Pet name")
    type: str = Field(description="Pet category")
    owner_email: str = Field(alias="ownerEmail", description="Owner key")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }
