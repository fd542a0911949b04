from filmorate.applications.interfaces.dtos.lookup import GenrePublic
from filmorate.domain.exceptions import NotFoundError
from filmorate.domain.ports.repositories.genre_storage import GenreStorage


class GetGenreUseCase:
    def __init__(self, genre_storage: GenreStorage):
        self.genre_storage = genre_storage

    async def execute(self, genre_id: int) -> GenrePublic:
        genre = await self.genre_storage.get_by_id(genre_id)
        if not genre:
            raise NotFoundError(f"Genre with id {genre_id} not found")

        return GenrePublic(id=genre.id, name=genre.name)
