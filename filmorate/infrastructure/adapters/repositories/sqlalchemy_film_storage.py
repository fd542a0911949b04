from typing import Iterable, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from filmorate.domain.exceptions import NotFoundError
from filmorate.domain.models.film import Film as DomainFilm
from filmorate.domain.models.genre import Genre as DomainGenre
from filmorate.domain.models.mpa import Mpa as DomainMpa
from filmorate.domain.ports.repositories.film_storage import FilmStorage
from filmorate.infrastructure.logging.logger import Logger
from filmorate.infrastructure.persistence.errors import repository_errors
from filmorate.infrastructure.persistence.models import Film as SQLFilm
from filmorate.infrastructure.persistence.models import FilmGenre as SQLFilmGenre
from filmorate.infrastructure.persistence.models import FilmLike as SQLFilmLike
from filmorate.infrastructure.persistence.models import Genre as SQLGenre
from filmorate.infrastructure.persistence.models import Mpa as SQLMpa

logger = Logger.get_logger(__name__)


class SQLAlchemyFilmStorage(FilmStorage):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _to_domain(self, sql_film: SQLFilm) -> DomainFilm:
        mpa = None
        if sql_film.mpa_id is not None:
            sql_mpa = await self.session.get(SQLMpa, sql_film.mpa_id)
            if sql_mpa:
                mpa = DomainMpa(id=sql_mpa.id, name=sql_mpa.name)

        sql_genres = await self.session.scalars(
            select(SQLGenre)
            .join(SQLFilmGenre, SQLFilmGenre.genre_id == SQLGenre.id)
            .where(SQLFilmGenre.film_id == sql_film.id)
            .order_by(SQLGenre.id)
        )
        likes = await self.session.scalars(select(SQLFilmLike.user_id).where(SQLFilmLike.film_id == sql_film.id))

        return DomainFilm(
            id=sql_film.id,
            name=sql_film.name,
            description=sql_film.description,
            release_date=sql_film.release_date,
            duration=sql_film.duration,
            mpa=mpa,
            genres=[DomainGenre(id=genre.id, name=genre.name) for genre in sql_genres.all()],
            likes=set(likes.all()),
        )

    async def _replace_genres(self, film_id: int, genres: Iterable[DomainGenre]) -> None:
        wanted = {genre.id for genre in genres}
        current = set(
            (await self.session.scalars(select(SQLFilmGenre.genre_id).where(SQLFilmGenre.film_id == film_id))).all()
        )

        stale = current - wanted
        if stale:
            await self.session.execute(
                delete(SQLFilmGenre).where(SQLFilmGenre.film_id == film_id, SQLFilmGenre.genre_id.in_(stale))
            )
        for genre_id in sorted(wanted - current):
            self.session.add(SQLFilmGenre(film_id=film_id, genre_id=genre_id))

    @repository_errors
    async def add(self, film: DomainFilm) -> DomainFilm:
        sql_film = SQLFilm(
            name=film.name,
            release_date=film.release_date,
            duration=film.duration,
            description=film.description,
            mpa_id=film.mpa.id if film.mpa else None,
        )
        self.session.add(sql_film)
        await self.session.flush()

        await self._replace_genres(sql_film.id, film.genres)
        await self.session.commit()
        logger.debug(f"Film added: {sql_film.id}")
        return await self._to_domain(sql_film)

    @repository_errors
    async def update(self, film: DomainFilm) -> DomainFilm:
        sql_film = await self.session.get(SQLFilm, film.id) if film.id is not None else None
        if not sql_film:
            raise NotFoundError(f"Film with id {film.id} not found")

        sql_film.name = film.name
        sql_film.description = film.description
        sql_film.release_date = film.release_date
        sql_film.duration = film.duration
        sql_film.mpa_id = film.mpa.id if film.mpa else None
        await self._replace_genres(sql_film.id, film.genres)

        await self.session.commit()
        logger.debug(f"Film updated: {sql_film.id}")
        return await self._to_domain(sql_film)

    @repository_errors
    async def delete(self, film_id: int) -> bool:
        await self.session.execute(delete(SQLFilmGenre).where(SQLFilmGenre.film_id == film_id))
        await self.session.execute(delete(SQLFilmLike).where(SQLFilmLike.film_id == film_id))
        result = await self.session.execute(delete(SQLFilm).where(SQLFilm.id == film_id))
        await self.session.commit()
        logger.debug(f"Film deleted: {film_id}")
        return (result.rowcount or 0) > 0

    @repository_errors
    async def get_by_id(self, film_id: int) -> Optional[DomainFilm]:
        sql_film = await self.session.get(SQLFilm, film_id)
        return await self._to_domain(sql_film) if sql_film else None

    @repository_errors
    async def get_all(self) -> List[DomainFilm]:
        sql_films = await self.session.scalars(select(SQLFilm).order_by(SQLFilm.id))
        return [await self._to_domain(sql_film) for sql_film in sql_films.all()]

    @repository_errors
    async def add_like(self, film_id: int, user_id: int) -> None:
        if await self.session.get(SQLFilmLike, (film_id, user_id)) is None:
            self.session.add(SQLFilmLike(film_id=film_id, user_id=user_id))
            await self.session.commit()

    @repository_errors
    async def remove_like(self, film_id: int, user_id: int) -> None:
        await self.session.execute(
            delete(SQLFilmLike).where(SQLFilmLike.film_id == film_id, SQLFilmLike.user_id == user_id)
        )
        await self.session.commit()

    @repository_errors
    async def get_popular(self, count: int) -> List[DomainFilm]:
        likes_count = func.count(SQLFilmLike.user_id)
        query = (
            select(SQLFilm)
            .outerjoin(SQLFilmLike, SQLFilmLike.film_id == SQLFilm.id)
            .group_by(SQLFilm.id)
            .order_by(likes_count.desc(), SQLFilm.id.asc())
            .limit(count)
        )
        sql_films = await self.session.scalars(query)
        return [await self._to_domain(sql_film) for sql_film in sql_films.all()]
