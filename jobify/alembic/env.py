"""
Alembic migration environment.
Reads DATABASE_URL through app settings and autogenerates against the jobify models.
"""
import sys
from pathlib import Path

# alembic/ lives in jobify/; put the project root on sys.path so "jobify" imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from logging.config import fileConfig

from sqlalchemy import create_engine, pool
from alembic import context

from jobify.app.core.config import settings
from jobify.app.db.base import Base

import jobify.app.models  # noqa: F401

config = context.config
config.set_main_option("sqlalchemy.url", settings.database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# SQLite cannot ALTER most columns in place; batch mode recreates the table
_render_as_batch = settings.database_url.startswith("sqlite")


def run_migrations_offline() -> None:
    """Emit SQL to stdout without a database connection."""
    context.configure(
        url=settings.database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=_render_as_batch,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a live connection."""
    connectable = create_engine(settings.database_url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=_render_as_batch,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
