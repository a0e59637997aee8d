"""
Pets API — Pet SQLAlchemy Model
=================================

What:  ORM model representing the `pets` table.
Why:   Maps the table's columns to typed Python attributes for queries.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by SqlAlchemyPetRepository, which converts rows to PetRecord
       explicitly (the ORM object never leaves the repository).

Table Design:
    - Integer SERIAL primary key: the mobile client addresses pets by number
    - user_email column: owner key, exposed as `owner_email` in Python
    - created_at / updated_at: server-assigned; updated_at is refreshed by a
      PostgreSQL trigger (see alembic revision 001) and by `onupdate` here
    - Index on user_email: supports GET /api/pets?ownerEmail=...
"""

from datetime import datetime

from sqlalchemy import TIMESTAMP, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from pets_api.database import Base


class Pet(Base):
    """
    One pet row.

    Lifecycle:
        1. Inserted by POST /api/pets (id assigned by the database)
        2. Read by id or by owner email
        3. Hard-deleted by DELETE /api/pets/{id}; never updated through the API
    """

    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    type: Mapped[str] = mapped_column(String(255), nullable=False)

    # Column keeps the original `user_email` name so existing databases
    # provisioned from database-schema.sql map without a migration
    owner_email: Mapped[str] = mapped_column(
        "user_email",
        String(255),
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=True,
        server_default=func.current_timestamp(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=True,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
    )

    __table_args__ = (
        Index("idx_pets_user_email", "user_email"),
        # SQLite otherwise reuses the highest id after a delete; SERIAL never does
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"<Pet(id={self.id}, name='{self.name}', type='{self.type}', "
            f"owner_email='{self.owner_email}')>"
        )
