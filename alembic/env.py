# alembic/env.py

import os
import sys
from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool
from alembic import context

# ------------------------------------------------------------------------------
# 1) Make sure the project root is on PYTHONPATH so "app" imports resolve when
#    alembic is run from the project root without an editable install.
# ------------------------------------------------------------------------------
sys.path.insert(0, os.getcwd())

# ------------------------------------------------------------------------------
# 2) Take the database URL from the application config (.env / environment),
#    overriding whatever alembic.ini says.
# ------------------------------------------------------------------------------
from app.core.config import DATABASE_URL

config = context.config
config.set_main_option("sqlalchemy.url", DATABASE_URL)

# ------------------------------------------------------------------------------
# 3) Configure Python logging based on alembic.ini
# ------------------------------------------------------------------------------
if config.config_file_name:
    fileConfig(config.config_file_name)

# ------------------------------------------------------------------------------
# 4) Register every table on Base.metadata for autogenerate
# ------------------------------------------------------------------------------
from app.core.database import Base
import app.db.models  # noqa: F401
target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit SQL scripts without connecting to the database."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=url.startswith("sqlite"),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Connect to the database and apply migrations directly."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
