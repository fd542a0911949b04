from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from filmorate.domain.models.mpa import Mpa as DomainMpa
from filmorate.domain.ports.repositories.mpa_storage import MpaStorage
from filmorate.infrastructure.persistence.errors import repository_errors
from filmorate.infrastructure.persistence.models import Mpa as SQLMpa


class SQLAlchemyMpaStorage(MpaStorage):
    def __init__(self, session: AsyncSession):
        self.session = session

    @repository_errors
    async def get_by_id(self, mpa_id: int) -> Optional[DomainMpa]:
        sql_mpa = await self.session.get(SQLMpa, mpa_id)
        return DomainMpa(id=sql_mpa.id, name=sql_mpa.name) if sql_mpa else None

    @repository_errors
    async def get_all(self) -> List[DomainMpa]:
        sql_ratings = await self.session.scalars(select(SQLMpa).order_by(SQLMpa.id))
        return [DomainMpa(id=sql_mpa.id, name=sql_mpa.name) for sql_mpa in sql_ratings.all()]
