from typing import Dict, Iterable, List, Optional

from filmorate.domain.models.mpa import Mpa
from filmorate.domain.ports.repositories.mpa_storage import MpaStorage


class InMemoryMpaStorage(MpaStorage):
    def __init__(self, ratings: Iterable[Mpa]):
        self._ratings: Dict[int, Mpa] = {mpa.id: mpa.model_copy() for mpa in ratings}

    async def get_by_id(self, mpa_id: int) -> Optional[Mpa]:
        mpa = self._ratings.get(mpa_id)
        return mpa.model_copy() if mpa else None

    async def get_all(self) -> List[Mpa]:
        return [self._ratings[mpa_id].model_copy() for mpa_id in sorted(self._ratings)]
