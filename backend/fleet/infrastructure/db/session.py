from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from fleet.core.config import settings
from fleet.infrastructure.db.base import Base

engine = create_async_engine(
    settings.database_url,
    pool_pre_ping=True,
)

SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

async def get_session() -> AsyncSession:
    async with SessionLocal() as session:
        yield session

async def init_db() -> None:
    # schema follows the ORM models; alembic/ holds the same table for managed deployments
    from fleet.domain.entities import driver  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
