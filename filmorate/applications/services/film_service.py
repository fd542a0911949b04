from typing import List, Optional

from filmorate.domain.exceptions import NotFoundError, ValidationError
from filmorate.domain.models.film import Film, FilmPatch
from filmorate.domain.ports.repositories.film_storage import FilmStorage
from filmorate.domain.ports.repositories.genre_storage import GenreStorage
from filmorate.domain.ports.repositories.mpa_storage import MpaStorage
from filmorate.domain.ports.repositories.user_storage import UserStorage
from filmorate.domain.ports.services.logger import LoggerPort


class FilmService:
    """Film aggregate: reference validation, partial updates, likes and ranking.

    Primary entities (film, then user) are looked up before any relation is
    touched. MPA and genre references are only checked on create/update.
    """

    def __init__(
        self,
        film_storage: FilmStorage,
        user_storage: UserStorage,
        genre_storage: GenreStorage,
        mpa_storage: MpaStorage,
        logger: LoggerPort,
        default_popular_count: int,
    ):
        self.film_storage = film_storage
        self.user_storage = user_storage
        self.genre_storage = genre_storage
        self.mpa_storage = mpa_storage
        self.logger = logger
        self.default_popular_count = default_popular_count

    async def create(self, film: Film) -> Film:
        resolved = await self._resolve_references(film)

        created = await self.film_storage.add(resolved)
        if created.id is None:
            raise RuntimeError("Film creation failed - no ID assigned")

        self.logger.info(f"Film created: {created.id} '{created.name}'")
        return created

    async def update(self, film_id: int, patch: FilmPatch) -> Film:
        existing = await self.get_by_id(film_id)
        merged = patch.apply(existing)
        resolved = await self._resolve_references(merged)

        updated = await self.film_storage.update(resolved)
        self.logger.info(f"Film updated: {updated.id} (fields: {sorted(patch.model_fields_set)})")
        return updated

    async def get_by_id(self, film_id: int) -> Film:
        film = await self.film_storage.get_by_id(film_id)
        if film is None:
            raise NotFoundError(f"Film with id {film_id} not found")
        return film

    async def list_all(self) -> List[Film]:
        return await self.film_storage.get_all()

    async def add_like(self, film_id: int, user_id: int) -> None:
        await self.get_by_id(film_id)
        await self._require_user(user_id)

        await self.film_storage.add_like(film_id, user_id)
        self.logger.info(f"User {user_id} liked film {film_id}")

    async def remove_like(self, film_id: int, user_id: int) -> None:
        await self.get_by_id(film_id)
        await self._require_user(user_id)

        await self.film_storage.remove_like(film_id, user_id)
        self.logger.info(f"User {user_id} removed like from film {film_id}")

    async def popular_films(self, count: Optional[int] = None) -> List[Film]:
        if count is None:
            count = self.default_popular_count
        if count <= 0:
            self.logger.warning(f"Rejected popular films request with count {count}")
            raise ValidationError("count must be a positive number")
        self.logger.debug(f"Loading {count} popular films")
        return await self.film_storage.get_popular(count)

    async def _require_user(self, user_id: int) -> None:
        if await self.user_storage.get_by_id(user_id) is None:
            raise NotFoundError(f"User with id {user_id} not found")

    async def _resolve_references(self, film: Film) -> Film:
        """Swap MPA / genre references for the stored lookup records."""
        mpa = None
        if film.mpa is not None:
            mpa = await self.mpa_storage.get_by_id(film.mpa.id)
            if mpa is None:
                raise NotFoundError(f"MPA rating with id {film.mpa.id} not found")

        requested = {genre.id for genre in film.genres}
        genres = await self.genre_storage.get_by_ids(requested) if requested else []
        missing = requested - {genre.id for genre in genres}
        if missing:
            raise NotFoundError(f"Genre with id {', '.join(str(genre_id) for genre_id in sorted(missing))} not found")

        return film.model_copy(update={"mpa": mpa, "genres": sorted(genres, key=lambda genre: genre.id)})
