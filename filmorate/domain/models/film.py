from datetime import date
from typing import ClassVar, List, Optional, Set, Tuple

from pydantic import BaseModel, Field

from filmorate.domain.exceptions import ValidationError
from filmorate.domain.models.genre import Genre
from filmorate.domain.models.mpa import Mpa


class Film(BaseModel):
    name: str
    release_date: date
    duration: int
    description: Optional[str] = None
    mpa: Optional[Mpa] = None
    genres: List[Genre] = Field(default_factory=list)
    likes: Set[int] = Field(default_factory=set)
    id: Optional[int] = None


class FilmPatch(BaseModel):
    """Partial film update.

    Only the fields present in ``model_fields_set`` are applied. A field set
    explicitly to ``None`` clears the value, which is allowed for
    ``description``, ``mpa`` and ``genres`` only.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[date] = None
    duration: Optional[int] = None
    mpa: Optional[Mpa] = None
    genres: Optional[List[Genre]] = None

    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "release_date", "duration")

    def changes(self) -> dict:
        changes = {field: getattr(self, field) for field in self.model_fields_set}
        for field in self.REQUIRED_FIELDS:
            if field in changes and changes[field] is None:
                raise ValidationError(f"Film field '{field}' cannot be cleared")
        if "genres" in changes and changes["genres"] is None:
            changes["genres"] = []
        return changes

    def apply(self, film: Film) -> Film:
        return film.model_copy(update=self.changes())
