"""Alembic env: the app runs on async drivers, migrations run on their sync twins."""
from logging.config import fileConfig
import os

from alembic import context
from sqlalchemy import engine_from_config, pool

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

from vocab_companion.db.base import Base  # noqa: E402
from vocab_companion.core.config import get_settings  # noqa: E402

target_metadata = Base.metadata

ASYNC_TO_SYNC_DRIVERS = {
    "postgresql+asyncpg://": "postgresql+psycopg2://",
    "sqlite+aiosqlite://": "sqlite://",
}


def to_sync_url(url: str) -> str:
    for async_prefix, sync_prefix in ASYNC_TO_SYNC_DRIVERS.items():
        if url.startswith(async_prefix):
            return sync_prefix + url[len(async_prefix):]
    return url


def get_url() -> str:
    # ALEMBIC_DATABASE_URL wins, then the app's DATABASE_URL, then alembic.ini
    url = os.getenv("ALEMBIC_DATABASE_URL") or get_settings().database_url
    if url:
        return to_sync_url(url)
    return config.get_main_option("sqlalchemy.url")


def _configure_kwargs(url: str) -> dict:
    # SQLite cannot ALTER most columns in place
    return {"compare_type": True, "render_as_batch": url.startswith("sqlite")}


def run_migrations_offline() -> None:
    url = get_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_kwargs(url),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    url = get_url()
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = url

    connectable = engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
        future=True,
    )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, **_configure_kwargs(url))
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
