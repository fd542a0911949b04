from abc import ABC, abstractmethod
from typing import List, Optional

from filmorate.domain.models.friendship import Friendship
from filmorate.domain.models.user import User


class UserStorage(ABC):
    @abstractmethod
    async def add(self, user: User) -> User:
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    async def get_all(self) -> List[User]:
        pass

    @abstractmethod
    async def add_friend(self, user_id: int, friend_id: int) -> Friendship:
        pass

    @abstractmethod
    async def remove_friend(self, user_id: int, friend_id: int) -> None:
        pass

    @abstractmethod
    async def get_friendship(self, user_id: int, friend_id: int) -> Optional[Friendship]:
        pass

    @abstractmethod
    async def get_friends(self, user_id: int) -> List[User]:
        pass

    @abstractmethod
    async def get_common_friends(self, user_id: int, other_id: int) -> List[User]:
        pass
