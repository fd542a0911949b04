from typing import List

from filmorate.applications.interfaces.dtos.lookup import GenrePublic
from filmorate.domain.ports.repositories.genre_storage import GenreStorage


class GetGenresUseCase:
    def __init__(self, genre_storage: GenreStorage):
        self.genre_storage = genre_storage

    async def execute(self) -> List[GenrePublic]:
        genres = await self.genre_storage.get_all()
        return [GenrePublic(id=genre.id, name=genre.name) for genre in genres]
