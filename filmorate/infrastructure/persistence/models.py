from datetime import date
from typing import Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class Mpa:
    __tablename__ = "mpa"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(16), unique=True)


@table_registry.mapped_as_dataclass
class Genre:
    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(64), unique=True)


@table_registry.mapped_as_dataclass
class Film:
    __tablename__ = "films"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    release_date: Mapped[date]
    duration: Mapped[int]
    description: Mapped[Optional[str]] = mapped_column(String(200), default=None)
    mpa_id: Mapped[Optional[int]] = mapped_column(ForeignKey("mpa.id"), default=None)


@table_registry.mapped_as_dataclass
class FilmGenre:
    __tablename__ = "film_genres"

    film_id: Mapped[int] = mapped_column(ForeignKey("films.id"), primary_key=True)
    genre_id: Mapped[int] = mapped_column(ForeignKey("genres.id"), primary_key=True)


@table_registry.mapped_as_dataclass
class FilmLike:
    __tablename__ = "film_likes"

    film_id: Mapped[int] = mapped_column(ForeignKey("films.id"), primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), primary_key=True)


@table_registry.mapped_as_dataclass
class User:
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    email: Mapped[str] = mapped_column(String(255))
    login: Mapped[str] = mapped_column(String(255))
    name: Mapped[str] = mapped_column(String(255))
    birthday: Mapped[Optional[date]] = mapped_column(default=None)


@table_registry.mapped_as_dataclass
class Friendship:
    __tablename__ = "friendships"

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), primary_key=True)
    friend_id: Mapped[int] = mapped_column(ForeignKey("users.id"), primary_key=True)
    confirmed: Mapped[bool] = mapped_column(default=False)
