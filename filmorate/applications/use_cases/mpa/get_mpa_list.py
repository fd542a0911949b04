from typing import List

from filmorate.applications.interfaces.dtos.lookup import MpaPublic
from filmorate.domain.ports.repositories.mpa_storage import MpaStorage


class GetMpaListUseCase:
    def __init__(self, mpa_storage: MpaStorage):
        self.mpa_storage = mpa_storage

    async def execute(self) -> List[MpaPublic]:
        ratings = await self.mpa_storage.get_all()
        return [MpaPublic(id=mpa.id, name=mpa.name) for mpa in ratings]
