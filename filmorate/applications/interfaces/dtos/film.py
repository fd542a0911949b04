from datetime import date
from typing import Annotated, List, Optional

from pydantic import AfterValidator, Field, StringConstraints

from filmorate.applications.interfaces.dtos.base import INT32_MAX, TEXT_MAX_LENGTH, CamelModel, Int32
from filmorate.applications.interfaces.dtos.lookup import GenrePublic, GenreRef, MpaPublic, MpaRef
from filmorate.domain.models.film import Film, FilmPatch
from filmorate.domain.models.genre import Genre
from filmorate.domain.models.mpa import Mpa

CINEMA_BIRTHDAY = date(1895, 12, 28)


def _check_release_date(value: date) -> date:
    if value < CINEMA_BIRTHDAY:
        raise ValueError(f"release date must not be earlier than {CINEMA_BIRTHDAY.isoformat()}")
    return value


FilmName = Annotated[str, StringConstraints(pattern=r"^\s*\S", max_length=TEXT_MAX_LENGTH)]
Description = Annotated[str, StringConstraints(max_length=200)]
ReleaseDate = Annotated[date, AfterValidator(_check_release_date)]
Duration = Annotated[int, Field(gt=0, le=INT32_MAX)]


def _genres(refs: Optional[List[GenreRef]]) -> List[Genre]:
    return [Genre(id=ref.id) for ref in refs or []]


class FilmSchema(CamelModel):
    name: FilmName
    description: Optional[Description] = None
    release_date: ReleaseDate
    duration: Duration
    mpa: Optional[MpaRef] = None
    genres: Optional[List[GenreRef]] = None

    def to_domain(self) -> Film:
        return Film(
            name=self.name,
            description=self.description,
            release_date=self.release_date,
            duration=self.duration,
            mpa=Mpa(id=self.mpa.id) if self.mpa else None,
            genres=_genres(self.genres),
        )


class FilmUpdateSchema(CamelModel):
    """Update request; fields left out of the JSON body keep their stored value."""

    id: Int32
    name: Optional[FilmName] = None
    description: Optional[Description] = None
    release_date: Optional[ReleaseDate] = None
    duration: Optional[Duration] = None
    mpa: Optional[MpaRef] = None
    genres: Optional[List[GenreRef]] = None

    def to_patch(self) -> FilmPatch:
        supplied = self.model_fields_set - {"id"}
        values = {field: getattr(self, field) for field in supplied}
        if "mpa" in values:
            values["mpa"] = Mpa(id=self.mpa.id) if self.mpa else None
        if "genres" in values:
            values["genres"] = _genres(self.genres) if self.genres is not None else None
        return FilmPatch.model_construct(_fields_set=supplied, **values)


class FilmPublic(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    release_date: date
    duration: int
    mpa: Optional[MpaPublic] = None
    genres: List[GenrePublic] = Field(default_factory=list)
    likes: List[int] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, film: Film) -> "FilmPublic":
        return cls(
            id=film.id,
            name=film.name,
            description=film.description,
            release_date=film.release_date,
            duration=film.duration,
            mpa=MpaPublic(id=film.mpa.id, name=film.mpa.name) if film.mpa else None,
            genres=[GenrePublic(id=genre.id, name=genre.name) for genre in film.genres],
            likes=sorted(film.likes),
        )
