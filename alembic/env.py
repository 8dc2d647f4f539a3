"""Alembic migration environment; reads DATABASE_URL from application settings."""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from briki.core.config import settings
from briki.db.models import Base  # noqa: F401 (registers every model)

config = context.config

database_uri = settings.sqlalchemy_database_uri
config.set_main_option("sqlalchemy.url", database_uri)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connect_args = {"sslmode": "require"} if settings.database_ssl else {}
    connectable = create_engine(database_uri, poolclass=pool.NullPool, connect_args=connect_args)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()
    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
