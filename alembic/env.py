"""
Alembic Migration Environment
=============================

What:  Runs the record-table migrations against settings.database_url.
How:   Builds an async engine from the configured URL and runs the migration
       steps through connection.run_sync().
Who:   Called by `alembic` CLI commands (upgrade, downgrade, revision).

Dialect notes:
    PostgreSQL (asyncpg) is the deployment target. SQLite (aiosqlite) also
    works for local runs; there ALTER TABLE is limited, so migrations are
    rendered in batch mode (copy-and-move) for that dialect only.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from records_api.config import settings
from records_api.database import Base

# Registers every model on Base.metadata for --autogenerate
import records_api.models  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

config.set_main_option("sqlalchemy.url", settings.database_url)

# Tables owned by this service; autogenerate ignores anything else in the schema
RECORD_TABLES = frozenset(target_metadata.tables)


def include_object(obj, name, type_, reflected, compare_to):
    if type_ == "table":
        return name in RECORD_TABLES
    return True


def _configure_options() -> dict:
    return {
        "target_metadata": target_metadata,
        "include_object": include_object,
        # Catches String(255) → String(320) style changes on autogenerate
        "compare_type": True,
        "render_as_batch": settings.is_sqlite,
    }


def run_migrations_offline() -> None:
    """Emit migration SQL to stdout without connecting to the database."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(),
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(connection=connection, **_configure_options())

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Connect with an async engine and apply pending migrations."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
