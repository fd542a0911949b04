from abc import ABC, abstractmethod
from typing import List, Optional

from filmorate.domain.models.mpa import Mpa


class MpaStorage(ABC):
    @abstractmethod
    async def get_by_id(self, mpa_id: int) -> Optional[Mpa]:
        pass

    @abstractmethod
    async def get_all(self) -> List[Mpa]:
        pass
