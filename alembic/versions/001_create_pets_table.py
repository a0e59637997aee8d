"""Create pets table

Revision ID: 001
Revises: None
Create Date: 2024-05-20 00:00:00.000000+00:00

What:  Creates the `pets` table, its owner-email index, and (on PostgreSQL)
       the trigger that refreshes updated_at on every UPDATE.
How:   Column names match the schema the mobile backend has always used
       (`user_email`), so databases created by hand map onto this revision.

Rollback: downgrade() drops the trigger, function, index and table.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


UPDATED_AT_FUNCTION = """
CREATE OR REPLACE FUNCTION update_updated_at_column()
RETURNS TRIGGER AS $$
BEGIN
    NEW.updated_at = CURRENT_TIMESTAMP;
    RETURN NEW;
END;
$$ language 'plpgsql';
"""

UPDATED_AT_TRIGGER = """
CREATE TRIGGER update_pets_updated_at
    BEFORE UPDATE ON pets
    FOR EACH ROW
    EXECUTE FUNCTION update_updated_at_column();
"""


def _is_postgresql() -> bool:
    return op.get_context().dialect.name == "postgresql"


def upgrade() -> None:
    op.create_table(
        "pets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(255), nullable=False),
        sa.Column("user_email", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=True,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=True,
        ),
        sa.PrimaryKeyConstraint("id"),
        # Matches the model: SQLite must not hand out a deleted id again
        sqlite_autoincrement=True,
    )

    # GET /api/pets?ownerEmail=... filters on this column
    op.create_index("idx_pets_user_email", "pets", ["user_email"])

    # No endpoint updates pets today; the trigger keeps updated_at honest for
    # manual fixes made directly in the database
    if _is_postgresql():
        op.execute(UPDATED_AT_FUNCTION)
        op.execute(UPDATED_AT_TRIGGER)


def downgrade() -> None:
    """
    WARNING: Destructive — every stored pet is permanently lost.
    """
    if _is_postgresql():
        op.execute("DROP TRIGGER IF EXISTS update_pets_updated_at ON pets")
        op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")
    op.drop_index("idx_pets_user_email", table_name="pets")
    op.drop_table("pets")
