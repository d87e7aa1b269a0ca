# --- Alembic env.py (SQLite by default, sync driver for migrations) ---

from pathlib import Path
import sys
from logging.config import fileConfig

from dotenv import load_dotenv
from alembic import context
from sqlalchemy import engine_from_config, pool
from sqlalchemy.engine import make_url

# Make 'fleet' importable and load backend/.env
BASE_DIR = Path(__file__).resolve().parents[1]  # .../backend
sys.path.insert(0, str(BASE_DIR))
load_dotenv(BASE_DIR / ".env")

# Import SQLAlchemy Base and models (so Alembic sees metadata)
from fleet.core.config import Settings
from fleet.infrastructure.db.base import Base
from fleet.domain.entities import driver  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def get_url() -> str:
    """Return a sync DB URL: the app's async driver is swapped for the default one."""
    url = make_url(Settings().database_url)
    backend = url.get_backend_name()
    return url.set(drivername=backend).render_as_string(hide_password=False)


def run_migrations_offline() -> None:
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        {"sqlalchemy.url": get_url()},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, render_as_batch=True)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
