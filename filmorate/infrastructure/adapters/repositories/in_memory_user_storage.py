from typing import Dict, List, Optional, Tuple

from filmorate.domain.exceptions import NotFoundError
from filmorate.domain.models.friendship import Friendship
from filmorate.domain.models.user import User
from filmorate.domain.ports.repositories.user_storage import UserStorage
from filmorate.infrastructure.adapters.repositories.in_memory_film_storage import InMemoryFilmStorage
from filmorate.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class InMemoryUserStorage(UserStorage):
    """Dict-backed user storage.

    When given the film storage of the same backend, deleting a user also
    drops their likes.
    """

    def __init__(self, film_storage: Optional[InMemoryFilmStorage] = None):
        self._film_storage = film_storage
        self._users: Dict[int, User] = {}
        self._friendships: Dict[Tuple[int, int], Friendship] = {}
        self._next_id = 1

    async def add(self, user: User) -> User:
        stored = user.model_copy(update={"id": self._next_id})
        self._next_id += 1
        self._users[stored.id] = stored
        logger.debug(f"User added: {stored.id}")
        return stored.model_copy()

    async def update(self, user: User) -> User:
        if user.id is None or user.id not in self._users:
            raise NotFoundError(f"User with id {user.id} not found")

        self._users[user.id] = user.model_copy()
        logger.debug(f"User updated: {user.id}")
        return user.model_copy()

    async def delete(self, user_id: int) -> bool:
        removed = self._users.pop(user_id, None)
        self._friendships = {
            key: friendship for key, friendship in self._friendships.items() if user_id not in key
        }
        if self._film_storage is not None:
            self._film_storage.remove_likes_by(user_id)
        logger.debug(f"User deleted: {user_id}")
        return removed is not None

    async def get_by_id(self, user_id: int) -> Optional[User]:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    async def get_all(self) -> List[User]:
        return [self._users[user_id].model_copy() for user_id in sorted(self._users)]

    async def add_friend(self, user_id: int, friend_id: int) -> Friendship:
        friendship = self._friendships.get((user_id, friend_id)) or Friendship(user_id=user_id, friend_id=friend_id)
        reverse = self._friendships.get((friend_id, user_id))
        if reverse is not None:
            reverse.confirmed = True
            friendship.confirmed = True

        self._friendships[(user_id, friend_id)] = friendship
        logger.debug(f"Friendship stored: {user_id} -> {friend_id} (confirmed={friendship.confirmed})")
        return friendship.model_copy()

    async def remove_friend(self, user_id: int, friend_id: int) -> None:
        self._friendships.pop((user_id, friend_id), None)
        self._friendships.pop((friend_id, user_id), None)

    async def get_friendship(self, user_id: int, friend_id: int) -> Optional[Friendship]:
        friendship = self._friendships.get((user_id, friend_id))
        return friendship.model_copy() if friendship else None

    async def get_friends(self, user_id: int) -> List[User]:
        return self._users_by_ids(self._friend_ids(user_id))

    async def get_common_friends(self, user_id: int, other_id: int) -> List[User]:
        return self._users_by_ids(self._friend_ids(user_id) & self._friend_ids(other_id))

    def _friend_ids(self, user_id: int) -> set:
        return {friend_id for (owner_id, friend_id) in self._friendships if owner_id == user_id}

    def _users_by_ids(self, user_ids) -> List[User]:
        return [self._users[user_id].model_copy() for user_id in sorted(user_ids) if user_id in self._users]
