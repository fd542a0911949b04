import functools
from typing import Any, Awaitable, Callable, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from filmorate.domain.exceptions import RepositoryError

T = TypeVar("T")


def repository_errors(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """Roll back the storage session and re-raise driver failures as RepositoryError."""

    @functools.wraps(func)
    async def wrapper(self: Any, *args, **kwargs) -> T:
        try:
            return await func(self, *args, **kwargs)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"{type(self).__name__}.{func.__name__} failed") from e

    return wrapper
