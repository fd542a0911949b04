from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncContextManager, AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from filmorate.domain.ports.repositories.film_storage import FilmStorage
from filmorate.domain.ports.repositories.genre_storage import GenreStorage
from filmorate.domain.ports.repositories.mpa_storage import MpaStorage
from filmorate.domain.ports.repositories.user_storage import UserStorage
from filmorate.infrastructure.adapters.repositories.in_memory_film_storage import InMemoryFilmStorage
from filmorate.infrastructure.adapters.repositories.in_memory_genre_storage import InMemoryGenreStorage
from filmorate.infrastructure.adapters.repositories.in_memory_mpa_storage import InMemoryMpaStorage
from filmorate.infrastructure.adapters.repositories.in_memory_user_storage import InMemoryUserStorage
from filmorate.infrastructure.adapters.repositories.sqlalchemy_film_storage import SQLAlchemyFilmStorage
from filmorate.infrastructure.adapters.repositories.sqlalchemy_genre_storage import SQLAlchemyGenreStorage
from filmorate.infrastructure.adapters.repositories.sqlalchemy_mpa_storage import SQLAlchemyMpaStorage
from filmorate.infrastructure.adapters.repositories.sqlalchemy_user_storage import SQLAlchemyUserStorage
from filmorate.infrastructure.config.settings import Settings
from filmorate.infrastructure.logging.logger import Logger
from filmorate.infrastructure.persistence.database import create_engine, init_schema
from filmorate.infrastructure.persistence.lookup_data import GENRES, MPA_RATINGS

logger = Logger.get_logger(__name__)


@dataclass
class Storages:
    films: FilmStorage
    users: UserStorage
    genres: GenreStorage
    mpa: MpaStorage


class StorageBackend(ABC):
    """Owns one storage variant for the lifetime of the application."""

    async def start(self) -> None:
        pass

    async def close(self) -> None:
        pass

    @abstractmethod
    def open(self) -> AsyncContextManager[Storages]:
        """Async context manager yielding the storages for one unit of work."""


class InMemoryStorageBackend(StorageBackend):
    def __init__(self):
        films = InMemoryFilmStorage()
        self._storages = Storages(
            films=films,
            users=InMemoryUserStorage(films),
            genres=InMemoryGenreStorage(GENRES),
            mpa=InMemoryMpaStorage(MPA_RATINGS),
        )

    @asynccontextmanager
    async def open(self) -> AsyncIterator[Storages]:
        yield self._storages


class SQLAlchemyStorageBackend(StorageBackend):
    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def start(self) -> None:
        await init_schema(self.engine)

    async def close(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def open(self) -> AsyncIterator[Storages]:
        async with AsyncSession(self.engine, expire_on_commit=False) as session:
            yield Storages(
                films=SQLAlchemyFilmStorage(session),
                users=SQLAlchemyUserStorage(session),
                genres=SQLAlchemyGenreStorage(session),
                mpa=SQLAlchemyMpaStorage(session),
            )


def build_storage_backend(settings: Settings) -> StorageBackend:
    logger.info(f"Using {settings.STORAGE_BACKEND} storage backend")
    if settings.STORAGE_BACKEND == "memory":
        return InMemoryStorageBackend()
    return SQLAlchemyStorageBackend(create_engine(settings))
