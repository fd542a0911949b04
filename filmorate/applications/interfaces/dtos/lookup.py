from typing import Optional

from pydantic import BaseModel, ConfigDict

from filmorate.applications.interfaces.dtos.base import Int32


class GenreRef(BaseModel):
    """Reference to a genre in a request; only the id is used."""

    id: Int32
    name: Optional[str] = None


class MpaRef(BaseModel):
    id: Int32
    name: Optional[str] = None


class GenrePublic(BaseModel):
    id: int
    name: str
    model_config = ConfigDict(from_attributes=True)


class MpaPublic(BaseModel):
    id: int
    name: str
    model_config = ConfigDict(from_attributes=True)
