from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from filmorate.domain.models.genre import Genre as DomainGenre
from filmorate.domain.ports.repositories.genre_storage import GenreStorage
from filmorate.infrastructure.persistence.errors import repository_errors
from filmorate.infrastructure.persistence.models import Genre as SQLGenre


class SQLAlchemyGenreStorage(GenreStorage):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_genre: SQLGenre) -> DomainGenre:
        return DomainGenre(id=sql_genre.id, name=sql_genre.name)

    @repository_errors
    async def get_by_id(self, genre_id: int) -> Optional[DomainGenre]:
        sql_genre = await self.session.get(SQLGenre, genre_id)
        return self._to_domain(sql_genre) if sql_genre else None

    @repository_errors
    async def get_by_ids(self, genre_ids: Iterable[int]) -> List[DomainGenre]:
        ids = set(genre_ids)
        if not ids:
            return []
        sql_genres = await self.session.scalars(select(SQLGenre).where(SQLGenre.id.in_(ids)).order_by(SQLGenre.id))
        return [self._to_domain(sql_genre) for sql_genre in sql_genres.all()]

    @repository_errors
    async def get_all(self) -> List[DomainGenre]:
        sql_genres = await self.session.scalars(select(SQLGenre).order_by(SQLGenre.id))
        return [self._to_domain(sql_genre) for sql_genre in sql_genres.all()]
