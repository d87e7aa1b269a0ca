import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from fleet.api.v1.dependencies import attachment_store
from fleet.domain.entities import driver  # noqa: F401
from fleet.infrastructure.db.base import Base
from fleet.infrastructure.db.session import get_session
from fleet.infrastructure.storage.local_store import LocalAttachmentStore
from fleet.main import app as api_app
from fleet.web.app import app as web_app
from fleet.web.client import DriversClient, QueryCache
from fleet.web.pages import drivers_client


@pytest.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False}
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def store(tmp_path):
    return LocalAttachmentStore(tmp_path / "uploads")


@pytest.fixture
async def api(engine, store):
    sessions = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def _session():
        async with sessions() as s:
            yield s

    api_app.dependency_overrides[get_session] = _session
    api_app.dependency_overrides[attachment_store] = lambda: store
    async with AsyncClient(transport=ASGITransport(app=api_app), base_url="http://api") as c:
        yield c
    api_app.dependency_overrides.clear()


@pytest.fixture
async def ui(api):
    client = DriversClient(api, QueryCache(ttl_seconds=60))
    web_app.dependency_overrides[drivers_client] = lambda: client
    async with AsyncClient(transport=ASGITransport(app=web_app), base_url="http://ui") as c:
        yield c
    web_app.dependency_overrides.clear()


@pytest.fixture
def driver_payload():
    return {
        "name": "João Silva",
        "cpf": "12345678901",
        "cnhNumber": "98765432100",
        "cnhCategory": "B,C",
        "phone": "11987654321",
        "status": "Active",
    }
