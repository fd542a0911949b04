from datetime import date
from typing import Annotated, Optional

from pydantic import AfterValidator, EmailStr, StringConstraints

from filmorate.applications.interfaces.dtos.base import TEXT_MAX_LENGTH, CamelModel, Int32
from filmorate.domain.models.user import User, UserPatch


def _check_birthday(value: date) -> date:
    if value > date.today():
        raise ValueError("birthday must not be in the future")
    return value


Login = Annotated[str, StringConstraints(pattern=r"^\S+$", max_length=TEXT_MAX_LENGTH)]
UserName = Annotated[str, StringConstraints(max_length=TEXT_MAX_LENGTH)]
Birthday = Annotated[date, AfterValidator(_check_birthday)]


class UserSchema(CamelModel):
    email: EmailStr
    login: Login
    name: Optional[UserName] = None
    birthday: Optional[Birthday] = None

    def to_domain(self) -> User:
        return User(email=self.email, login=self.login, name=self.name, birthday=self.birthday)


class UserUpdateSchema(CamelModel):
    id: Int32
    email: Optional[EmailStr] = None
    login: Optional[Login] = None
    name: Optional[UserName] = None
    birthday: Optional[Birthday] = None

    def to_patch(self) -> UserPatch:
        supplied = self.model_fields_set - {"id"}
        return UserPatch.model_construct(_fields_set=supplied, **{field: getattr(self, field) for field in supplied})


class UserPublic(CamelModel):
    id: int
    email: str
    login: str
    name: str
    birthday: Optional[date] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserPublic":
        return cls(id=user.id, email=user.email, login=user.login, name=user.name, birthday=user.birthday)
