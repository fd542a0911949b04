from datetime import date
from typing import List, Optional

from filmorate.domain.models.film import Film
from filmorate.domain.models.genre import Genre
from filmorate.domain.models.mpa import Mpa
from filmorate.domain.models.user import User


class FilmFactory:
    """Factory for creating test films"""

    def create_domain_film(
        self,
        *,
        id: Optional[int] = None,
        name: str = "Solaris",
        description: Optional[str] = "A psychologist is sent to a space station",
        release_date: date = date(1972, 3, 20),
        duration: int = 167,
        mpa: Optional[Mpa] = None,
        genres: Optional[List[Genre]] = None,
        likes: Optional[set] = None,
    ) -> Film:
        """Create a domain film for testing"""
        return Film(
            id=id,
            name=name,
            description=description,
            release_date=release_date,
            duration=duration,
            mpa=mpa,
            genres=genres or [],
            likes=likes or set(),
        )

    def create_film_data(
        self,
        *,
        name: str = "Solaris",
        description: str = "A psychologist is sent to a space station",
        release_date: str = "1972-03-20",
        duration: int = 167,
        mpa_id: Optional[int] = 1,
        genre_ids: Optional[List[int]] = None,
    ) -> dict:
        """Create film request body (camelCase) for API tests"""
        data = {"name": name, "description": description, "releaseDate": release_date, "duration": duration}
        if mpa_id is not None:
            data["mpa"] = {"id": mpa_id}
        if genre_ids is not None:
            data["genres"] = [{"id": genre_id} for genre_id in genre_ids]
        return data


class UserFactory:
    """Factory for creating test users"""

    def create_domain_user(
        self,
        *,
        id: Optional[int] = None,
        email: str = "user@example.com",
        login: str = "user",
        name: Optional[str] = "Test User",
        birthday: Optional[date] = date(1990, 1, 1),
    ) -> User:
        """Create a domain user for testing"""
        return User(id=id, email=email, login=login, name=name, birthday=birthday)

    def create_user_data(
        self,
        *,
        email: str = "user@example.com",
        login: str = "user",
        name: Optional[str] = "Test User",
        birthday: str = "1990-01-01",
    ) -> dict:
        """Create user request body for API tests"""
        data = {"email": email, "login": login, "birthday": birthday}
        if name is not None:
            data["name"] = name
        return data


film_factory = FilmFactory()
user_factory = UserFactory()
