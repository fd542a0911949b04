from typing import Dict, Iterable, List, Optional

from filmorate.domain.models.genre import Genre
from filmorate.domain.ports.repositories.genre_storage import GenreStorage


class InMemoryGenreStorage(GenreStorage):
    def __init__(self, genres: Iterable[Genre]):
        self._genres: Dict[int, Genre] = {genre.id: genre.model_copy() for genre in genres}

    async def get_by_id(self, genre_id: int) -> Optional[Genre]:
        genre = self._genres.get(genre_id)
        return genre.model_copy() if genre else None

    async def get_by_ids(self, genre_ids: Iterable[int]) -> List[Genre]:
        return [self._genres[genre_id].model_copy() for genre_id in sorted(set(genre_ids)) if genre_id in self._genres]

    async def get_all(self) -> List[Genre]:
        return [self._genres[genre_id].model_copy() for genre_id in sorted(self._genres)]
