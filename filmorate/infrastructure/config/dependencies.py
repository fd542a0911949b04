from typing import Annotated, AsyncIterator

from fastapi import Depends, Request

from filmorate.applications.services.film_service import FilmService
from filmorate.applications.services.user_service import UserService
from filmorate.domain.ports.repositories.film_storage import FilmStorage
from filmorate.domain.ports.repositories.genre_storage import GenreStorage
from filmorate.domain.ports.repositories.mpa_storage import MpaStorage
from filmorate.domain.ports.repositories.user_storage import UserStorage
from filmorate.infrastructure.config.settings import Settings
from filmorate.infrastructure.config.storage_backend import StorageBackend, Storages
from filmorate.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


def get_settings() -> Settings:
    return Settings()


def get_storage_backend(request: Request) -> StorageBackend:
    return request.app.state.storage_backend


async def get_storages(backend: Annotated[StorageBackend, Depends(get_storage_backend)]) -> AsyncIterator[Storages]:
    async with backend.open() as storages:
        yield storages


StoragesDep = Annotated[Storages, Depends(get_storages)]


def get_film_storage(storages: StoragesDep) -> FilmStorage:
    return storages.films


def get_user_storage(storages: StoragesDep) -> UserStorage:
    return storages.users


def get_genre_storage(storages: StoragesDep) -> GenreStorage:
    return storages.genres


def get_mpa_storage(storages: StoragesDep) -> MpaStorage:
    return storages.mpa


def get_film_service(
    film_storage: Annotated[FilmStorage, Depends(get_film_storage)],
    user_storage: Annotated[UserStorage, Depends(get_user_storage)],
    genre_storage: Annotated[GenreStorage, Depends(get_genre_storage)],
    mpa_storage: Annotated[MpaStorage, Depends(get_mpa_storage)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> FilmService:
    return FilmService(
        film_storage=film_storage,
        user_storage=user_storage,
        genre_storage=genre_storage,
        mpa_storage=mpa_storage,
        logger=StdLoggerAdapter(FilmService.__module__),
        default_popular_count=settings.POPULAR_FILMS_DEFAULT_COUNT,
    )


def get_user_service(user_storage: Annotated[UserStorage, Depends(get_user_storage)]) -> UserService:
    return UserService(user_storage=user_storage, logger=StdLoggerAdapter(UserService.__module__))
