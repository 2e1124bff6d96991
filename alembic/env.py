"""Alembic environment for the users, directors and movies tables.

The database URL comes from film_api settings (DATABASE_URL) unless overridden
on the command line: ``alembic -x dburl=postgresql://... upgrade head``.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

from film_api.core.config import settings
from film_api.models import Base

# Every model module must be imported so Base.metadata knows its table.
from film_api.models import Director, Movie, User  # noqa: F401

config = context.config
if config.config_file_name is not None:
    try:
        fileConfig(config.config_file_name)
    except KeyError:
        # alembic.ini without [loggers]/[handlers]/[formatters]
        pass

target_metadata = Base.metadata


def get_url() -> str:
    """Return the -x dburl override, else DATABASE_URL from settings."""
    x_args = context.get_x_argument(as_dictionary=True)
    return x_args.get("dburl") or settings.DATABASE_URL


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of connecting."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(get_url(), poolclass=NullPool)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
