from abc import ABC, abstractmethod
from typing import List, Optional

from filmorate.domain.models.film import Film


class FilmStorage(ABC):
    @abstractmethod
    async def add(self, film: Film) -> Film:
        pass

    @abstractmethod
    async def update(self, film: Film) -> Film:
        pass

    @abstractmethod
    async def delete(self, film_id: int) -> bool:
        pass

    @abstractmethod
    async def get_by_id(self, film_id: int) -> Optional[Film]:
        pass

    @abstractmethod
    async def get_all(self) -> List[Film]:
        pass

    @abstractmethod
    async def add_like(self, film_id: int, user_id: int) -> None:
        pass

    @abstractmethod
    async def remove_like(self, film_id: int, user_id: int) -> None:
        pass

    @abstractmethod
    async def get_popular(self, count: int) -> List[Film]:
        pass
