from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from filmorate.infrastructure.config.settings import Settings
from filmorate.infrastructure.logging.logger import Logger
from filmorate.infrastructure.persistence.lookup_data import GENRES, MPA_RATINGS
from filmorate.infrastructure.persistence.models import Genre, Mpa, table_registry

logger = Logger.get_logger(__name__)


def create_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)


async def init_schema(engine: AsyncEngine) -> None:
    """Create missing tables and seed the genre / MPA lookup rows."""
    async with engine.begin() as conn:
        await conn.run_sync(table_registry.metadata.create_all)

    async with AsyncSession(engine, expire_on_commit=False) as session:
        existing_genres = set((await session.scalars(select(Genre.id))).all())
        for genre in GENRES:
            if genre.id not in existing_genres:
                session.add(Genre(id=genre.id, name=genre.name))

        existing_ratings = set((await session.scalars(select(Mpa.id))).all())
        for mpa in MPA_RATINGS:
            if mpa.id not in existing_ratings:
                session.add(Mpa(id=mpa.id, name=mpa.name))

        await session.commit()
    logger.info("Database schema ready")
