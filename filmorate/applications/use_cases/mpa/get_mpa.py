from filmorate.applications.interfaces.dtos.lookup import MpaPublic
from filmorate.domain.exceptions import NotFoundError
from filmorate.domain.ports.repositories.mpa_storage import MpaStorage


class GetMpaUseCase:
    def __init__(self, mpa_storage: MpaStorage):
        self.mpa_storage = mpa_storage

    async def execute(self, mpa_id: int) -> MpaPublic:
        mpa = await self.mpa_storage.get_by_id(mpa_id)
        if not mpa:
            raise NotFoundError(f"MPA rating with id {mpa_id} not found")

        return MpaPublic(id=mpa.id, name=mpa.name)
