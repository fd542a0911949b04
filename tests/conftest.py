from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from filmorate.app import app
from filmorate.domain.ports.repositories.film_storage import FilmStorage
from filmorate.domain.ports.repositories.genre_storage import GenreStorage
from filmorate.domain.ports.repositories.mpa_storage import MpaStorage
from filmorate.domain.ports.repositories.user_storage import UserStorage
from filmorate.domain.ports.services.logger import LoggerPort
from filmorate.infrastructure.config.dependencies import get_storage_backend
from filmorate.infrastructure.config.storage_backend import InMemoryStorageBackend, SQLAlchemyStorageBackend

STORAGE_BACKENDS = ["memory", "sqlalchemy"]


async def _build_backend(kind, tmp_path):
    if kind == "memory":
        return InMemoryStorageBackend()

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'filmorate.db'}")
    backend = SQLAlchemyStorageBackend(engine)
    await backend.start()
    return backend


@pytest_asyncio.fixture(params=STORAGE_BACKENDS)
async def storage_backend(request, tmp_path):
    """Each storage variant, started and closed around the test"""
    backend = await _build_backend(request.param, tmp_path)
    yield backend
    await backend.close()


@pytest_asyncio.fixture
async def storages(storage_backend):
    """Storages of one unit of work on the current backend"""
    async with storage_backend.open() as opened:
        yield opened


@pytest_asyncio.fixture
async def client(storage_backend):
    """HTTP client wired to the current backend through a dependency override"""
    app.dependency_overrides[get_storage_backend] = lambda: storage_backend

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# Shared fixtures for service testing
@pytest.fixture
def mock_film_storage():
    return AsyncMock(spec=FilmStorage)


@pytest.fixture
def mock_user_storage():
    return AsyncMock(spec=UserStorage)


@pytest.fixture
def mock_genre_storage():
    return AsyncMock(spec=GenreStorage)


@pytest.fixture
def mock_mpa_storage():
    return AsyncMock(spec=MpaStorage)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=LoggerPort)
