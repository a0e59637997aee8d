"""
Alembic Migration Environment
===============================

What:  Runs the pets schema migrations against the database in DATABASE_URL.
How:   The URL comes from pets_api settings (alembic.ini carries none). Online
       runs go through an async engine and connection.run_sync(); offline
       runs (`alembic upgrade head --sql`) print the DDL instead.
Who:   Called by `alembic upgrade head` during deployment.

Dialects:
    PostgreSQL: the production target; revision 001 also installs the
                updated_at trigger there.
    SQLite:     local runs; migrations use batch mode because SQLite cannot
                ALTER most column properties in place.
"""

import asyncio
from logging.config import fileConfig
from typing import Any, Dict

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine
from alembic import context

from pets_api.config import settings
from pets_api.database import Base
from pets_api.models.pet import Pet  # noqa: F401  registers the pets table

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _configure_options() -> Dict[str, Any]:
    return {
        "target_metadata": target_metadata,
        # --autogenerate notices String(255) → String(512) style changes
        "compare_type": True,
        "render_as_batch": settings.is_sqlite,
    }


def run_migrations_offline() -> None:
    context.configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(),
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, **_configure_options())

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    # One short-lived connection; the app's pool settings do not apply here
    connectable = create_async_engine(settings.database_url, poolclass=pool.NullPool)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
