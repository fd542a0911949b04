from typing import Dict, List, Optional

from filmorate.domain.exceptions import NotFoundError
from filmorate.domain.models.film import Film
from filmorate.domain.ports.repositories.film_storage import FilmStorage
from filmorate.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


def _normalize_genres(film: Film) -> Film:
    unique = {genre.id: genre for genre in film.genres}
    return film.model_copy(update={"genres": [unique[genre_id] for genre_id in sorted(unique)]}, deep=True)


class InMemoryFilmStorage(FilmStorage):
    """Dict-backed film storage. Films are copied on the way in and out."""

    def __init__(self):
        self._films: Dict[int, Film] = {}
        self._next_id = 1

    async def add(self, film: Film) -> Film:
        stored = _normalize_genres(film).model_copy(update={"id": self._next_id, "likes": set()})
        self._next_id += 1
        self._films[stored.id] = stored
        logger.debug(f"Film added: {stored.id}")
        return stored.model_copy(deep=True)

    async def update(self, film: Film) -> Film:
        existing = self._films.get(film.id) if film.id is not None else None
        if existing is None:
            raise NotFoundError(f"Film with id {film.id} not found")

        stored = _normalize_genres(film).model_copy(update={"likes": set(existing.likes)})
        self._films[stored.id] = stored
        logger.debug(f"Film updated: {stored.id}")
        return stored.model_copy(deep=True)

    async def delete(self, film_id: int) -> bool:
        removed = self._films.pop(film_id, None)
        logger.debug(f"Film deleted: {film_id}")
        return removed is not None

    async def get_by_id(self, film_id: int) -> Optional[Film]:
        film = self._films.get(film_id)
        return film.model_copy(deep=True) if film else None

    async def get_all(self) -> List[Film]:
        return [self._films[film_id].model_copy(deep=True) for film_id in sorted(self._films)]

    async def add_like(self, film_id: int, user_id: int) -> None:
        self._require(film_id).likes.add(user_id)

    async def remove_like(self, film_id: int, user_id: int) -> None:
        self._require(film_id).likes.discard(user_id)

    async def get_popular(self, count: int) -> List[Film]:
        ranked = sorted(self._films.values(), key=lambda film: (-len(film.likes), film.id))
        return [film.model_copy(deep=True) for film in ranked[:count]]

    def remove_likes_by(self, user_id: int) -> None:
        for film in self._films.values():
            film.likes.discard(user_id)

    def _require(self, film_id: int) -> Film:
        film = self._films.get(film_id)
        if film is None:
            raise NotFoundError(f"Film with id {film_id} not found")
        return film
