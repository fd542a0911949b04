from datetime import date
from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel

from filmorate.domain.exceptions import ValidationError


class User(BaseModel):
    email: str
    login: str
    name: Optional[str] = None
    birthday: Optional[date] = None
    id: Optional[int] = None


class UserPatch(BaseModel):
    """Partial user update; see FilmPatch for the unset/None distinction."""

    email: Optional[str] = None
    login: Optional[str] = None
    name: Optional[str] = None
    birthday: Optional[date] = None

    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("email", "login")

    def changes(self) -> dict:
        changes = {field: getattr(self, field) for field in self.model_fields_set}
        for field in self.REQUIRED_FIELDS:
            if field in changes and changes[field] is None:
                raise ValidationError(f"User field '{field}' cannot be cleared")
        return changes

    def apply(self, user: User) -> User:
        return user.model_copy(update=self.changes())
