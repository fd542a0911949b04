from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from filmorate.domain.models.genre import Genre


class GenreStorage(ABC):
    @abstractmethod
    async def get_by_id(self, genre_id: int) -> Optional[Genre]:
        pass

    @abstractmethod
    async def get_by_ids(self, genre_ids: Iterable[int]) -> List[Genre]:
        pass

    @abstractmethod
    async def get_all(self) -> List[Genre]:
        pass
