from collections.abc import AsyncGenerator

from httpx import ASGITransport, AsyncClient
import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from resource_api.config import Settings
from resource_api.database import create_engine, create_session_maker, init_models
from resource_api.main import create_app
from resource_api.queries import ResourceQueries
from resource_api.services import ResourceService


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    return Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'resources.db'}")


@pytest.fixture
async def db_engine(settings) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_engine(settings)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    async with create_session_maker(db_engine)() as session:
        yield session


@pytest.fixture
def queries(db_session) -> ResourceQueries:
    return ResourceQueries(db_session)


@pytest.fixture
def service(queries) -> ResourceService:
    return ResourceService(queries)


@pytest.fixture
async def app(settings):
    app = create_app(settings)
    await init_models(app.state.engine)
    yield app
    await app.state.engine.dispose()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
