from typing import List

from filmorate.domain.models.genre import Genre
from filmorate.domain.models.mpa import Mpa

GENRES: List[Genre] = [
    Genre(id=1, name="Comedy"),
    Genre(id=2, name="Drama"),
    Genre(id=3, name="Animation"),
    Genre(id=4, name="Thriller"),
    Genre(id=5, name="Documentary"),
    Genre(id=6, name="Action"),
]

MPA_RATINGS: List[Mpa] = [
    Mpa(id=1, name="G"),
    Mpa(id=2, name="PG"),
    Mpa(id=3, name="PG-13"),
    Mpa(id=4, name="R"),
    Mpa(id=5, name="NC-17"),
]
