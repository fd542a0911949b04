import pytest

from filmorate.applications.interfaces.dtos.lookup import GenrePublic, MpaPublic
from filmorate.applications.use_cases.genre.get_genre import GetGenreUseCase
from filmorate.applications.use_cases.genre.get_genres import GetGenresUseCase
from filmorate.applications.use_cases.mpa.get_mpa import GetMpaUseCase
from filmorate.applications.use_cases.mpa.get_mpa_list import GetMpaListUseCase
from filmorate.domain.exceptions import NotFoundError
from filmorate.domain.models.genre import Genre
from filmorate.domain.models.mpa import Mpa


class TestGenreUseCases:
    @pytest.mark.asyncio
    async def test_get_genre(self, mock_genre_storage):
        """Test lookup of a single genre"""
        # Arrange
        mock_genre_storage.get_by_id.return_value = Genre(id=2, name="Drama")

        # Act
        result = await GetGenreUseCase(mock_genre_storage).execute(2)

        # Assert
        assert isinstance(result, GenrePublic)
        assert result == GenrePublic(id=2, name="Drama")
        mock_genre_storage.get_by_id.assert_awaited_once_with(2)

    @pytest.mark.asyncio
    async def test_get_unknown_genre(self, mock_genre_storage):
        mock_genre_storage.get_by_id.return_value = None

        with pytest.raises(NotFoundError, match="Genre with id 77 not found"):
            await GetGenreUseCase(mock_genre_storage).execute(77)

    @pytest.mark.asyncio
    async def test_get_genres(self, mock_genre_storage):
        mock_genre_storage.get_all.return_value = [Genre(id=1, name="Comedy"), Genre(id=2, name="Drama")]

        result = await GetGenresUseCase(mock_genre_storage).execute()

        assert [genre.name for genre in result] == ["Comedy", "Drama"]


class TestMpaUseCases:
    @pytest.mark.asyncio
    async def test_get_mpa(self, mock_mpa_storage):
        mock_mpa_storage.get_by_id.return_value = Mpa(id=3, name="PG-13")

        result = await GetMpaUseCase(mock_mpa_storage).execute(3)

        assert result == MpaPublic(id=3, name="PG-13")

    @pytest.mark.asyncio
    async def test_get_unknown_mpa(self, mock_mpa_storage):
        mock_mpa_storage.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await GetMpaUseCase(mock_mpa_storage).execute(9)

    @pytest.mark.asyncio
    async def test_get_mpa_list(self, mock_mpa_storage):
        mock_mpa_storage.get_all.return_value = [Mpa(id=1, name="G")]

        result = await GetMpaListUseCase(mock_mpa_storage).execute()

        assert result == [MpaPublic(id=1, name="G")]
