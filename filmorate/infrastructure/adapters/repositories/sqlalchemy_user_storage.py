from typing import List, Optional

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from filmorate.domain.exceptions import NotFoundError
from filmorate.domain.models.friendship import Friendship as DomainFriendship
from filmorate.domain.models.user import User as DomainUser
from filmorate.domain.ports.repositories.user_storage import UserStorage
from filmorate.infrastructure.logging.logger import Logger
from filmorate.infrastructure.persistence.errors import repository_errors
from filmorate.infrastructure.persistence.models import FilmLike as SQLFilmLike
from filmorate.infrastructure.persistence.models import Friendship as SQLFriendship
from filmorate.infrastructure.persistence.models import User as SQLUser

logger = Logger.get_logger(__name__)


class SQLAlchemyUserStorage(UserStorage):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_user: SQLUser) -> DomainUser:
        return DomainUser(
            id=sql_user.id,
            email=sql_user.email,
            login=sql_user.login,
            name=sql_user.name,
            birthday=sql_user.birthday,
        )

    def _friendship_to_domain(self, sql_friendship: SQLFriendship) -> DomainFriendship:
        return DomainFriendship(
            user_id=sql_friendship.user_id,
            friend_id=sql_friendship.friend_id,
            confirmed=sql_friendship.confirmed,
        )

    @repository_errors
    async def add(self, user: DomainUser) -> DomainUser:
        sql_user = SQLUser(email=user.email, login=user.login, name=user.name, birthday=user.birthday)
        self.session.add(sql_user)
        await self.session.commit()
        await self.session.refresh(sql_user)
        logger.debug(f"User added: {sql_user.id}")
        return self._to_domain(sql_user)

    @repository_errors
    async def update(self, user: DomainUser) -> DomainUser:
        sql_user = await self.session.get(SQLUser, user.id) if user.id is not None else None
        if not sql_user:
            raise NotFoundError(f"User with id {user.id} not found")

        sql_user.email = user.email
        sql_user.login = user.login
        sql_user.name = user.name
        sql_user.birthday = user.birthday

        await self.session.commit()
        await self.session.refresh(sql_user)
        logger.debug(f"User updated: {sql_user.id}")
        return self._to_domain(sql_user)

    @repository_errors
    async def delete(self, user_id: int) -> bool:
        await self.session.execute(
            delete(SQLFriendship).where(or_(SQLFriendship.user_id == user_id, SQLFriendship.friend_id == user_id))
        )
        await self.session.execute(delete(SQLFilmLike).where(SQLFilmLike.user_id == user_id))
        result = await self.session.execute(delete(SQLUser).where(SQLUser.id == user_id))
        await self.session.commit()
        logger.debug(f"User deleted: {user_id}")
        return (result.rowcount or 0) > 0

    @repository_errors
    async def get_by_id(self, user_id: int) -> Optional[DomainUser]:
        sql_user = await self.session.get(SQLUser, user_id)
        return self._to_domain(sql_user) if sql_user else None

    @repository_errors
    async def get_all(self) -> List[DomainUser]:
        sql_users = await self.session.scalars(select(SQLUser).order_by(SQLUser.id))
        return [self._to_domain(sql_user) for sql_user in sql_users.all()]

    @repository_errors
    async def add_friend(self, user_id: int, friend_id: int) -> DomainFriendship:
        friendship = await self.session.get(SQLFriendship, (user_id, friend_id))
        reverse = await self.session.get(SQLFriendship, (friend_id, user_id))

        if friendship is None:
            friendship = SQLFriendship(user_id=user_id, friend_id=friend_id, confirmed=False)
            self.session.add(friendship)
        if reverse is not None:
            reverse.confirmed = True
            friendship.confirmed = True

        await self.session.commit()
        logger.debug(f"Friendship stored: {user_id} -> {friend_id} (confirmed={friendship.confirmed})")
        return self._friendship_to_domain(friendship)

    @repository_errors
    async def remove_friend(self, user_id: int, friend_id: int) -> None:
        await self.session.execute(
            delete(SQLFriendship).where(
                or_(
                    (SQLFriendship.user_id == user_id) & (SQLFriendship.friend_id == friend_id),
                    (SQLFriendship.user_id == friend_id) & (SQLFriendship.friend_id == user_id),
                )
            )
        )
        await self.session.commit()

    @repository_errors
    async def get_friendship(self, user_id: int, friend_id: int) -> Optional[DomainFriendship]:
        friendship = await self.session.get(SQLFriendship, (user_id, friend_id))
        return self._friendship_to_domain(friendship) if friendship else None

    @repository_errors
    async def get_friends(self, user_id: int) -> List[DomainUser]:
        query = (
            select(SQLUser)
            .join(SQLFriendship, SQLFriendship.friend_id == SQLUser.id)
            .where(SQLFriendship.user_id == user_id)
            .order_by(SQLUser.id)
        )
        sql_users = await self.session.scalars(query)
        return [self._to_domain(sql_user) for sql_user in sql_users.all()]

    @repository_errors
    async def get_common_friends(self, user_id: int, other_id: int) -> List[DomainUser]:
        mine = aliased(SQLFriendship)
        theirs = aliased(SQLFriendship)
        query = (
            select(SQLUser)
            .join(mine, mine.friend_id == SQLUser.id)
            .join(theirs, theirs.friend_id == SQLUser.id)
            .where(mine.user_id == user_id, theirs.user_id == other_id)
            .order_by(SQLUser.id)
        )
        sql_users = await self.session.scalars(query)
        return [self._to_domain(sql_user) for sql_user in sql_users.all()]
