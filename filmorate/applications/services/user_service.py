from typing import List

from filmorate.domain.exceptions import NotFoundError, ValidationError
from filmorate.domain.models.friendship import Friendship
from filmorate.domain.models.user import User, UserPatch
from filmorate.domain.ports.repositories.user_storage import UserStorage
from filmorate.domain.ports.services.logger import LoggerPort


class UserService:
    def __init__(self, user_storage: UserStorage, logger: LoggerPort):
        self.user_storage = user_storage
        self.logger = logger

    @staticmethod
    def _with_default_name(user: User) -> User:
        if user.name is None or not user.name.strip():
            return user.model_copy(update={"name": user.login})
        return user

    async def create(self, user: User) -> User:
        created = await self.user_storage.add(self._with_default_name(user))
        if created.id is None:
            raise RuntimeError("User creation failed - no ID assigned")

        self.logger.info(f"User created: {created.id} '{created.login}'")
        return created

    async def update(self, user_id: int, patch: UserPatch) -> User:
        existing = await self.get_by_id(user_id)
        merged = self._with_default_name(patch.apply(existing))

        updated = await self.user_storage.update(merged)
        self.logger.info(f"User updated: {updated.id} (fields: {sorted(patch.model_fields_set)})")
        return updated

    async def get_by_id(self, user_id: int) -> User:
        user = await self.user_storage.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with id {user_id} not found")
        return user

    async def list_all(self) -> List[User]:
        return await self.user_storage.get_all()

    async def add_friend(self, user_id: int, friend_id: int) -> Friendship:
        """Send a friend request; a request in the other direction confirms both."""
        if user_id == friend_id:
            self.logger.warning(f"User {user_id} tried to add themselves as a friend")
            raise ValidationError("A user cannot add themselves as a friend")

        await self.get_by_id(user_id)
        await self.get_by_id(friend_id)

        friendship = await self.user_storage.add_friend(user_id, friend_id)
        if friendship.confirmed:
            self.logger.info(f"Users {user_id} and {friend_id} are now friends")
        else:
            self.logger.info(f"User {user_id} sent a friend request to {friend_id}")
        return friendship

    async def remove_friend(self, user_id: int, friend_id: int) -> None:
        await self.get_by_id(user_id)
        await self.get_by_id(friend_id)

        await self.user_storage.remove_friend(user_id, friend_id)
        self.logger.info(f"Users {user_id} and {friend_id} are no longer friends")

    async def get_friends(self, user_id: int) -> List[User]:
        await self.get_by_id(user_id)
        return await self.user_storage.get_friends(user_id)

    async def get_common_friends(self, user_id: int, other_id: int) -> List[User]:
        await self.get_by_id(user_id)
        await self.get_by_id(other_id)
        self.logger.debug(f"Computing common friends of {user_id} and {other_id}")
        return await self.user_storage.get_common_friends(user_id, other_id)
