from typing import Annotated, List

from fastapi import APIRouter, Depends

from filmorate.applications.interfaces.dtos.lookup import GenrePublic
from filmorate.applications.use_cases.genre.get_genre import GetGenreUseCase
from filmorate.applications.use_cases.genre.get_genres import GetGenresUseCase
from filmorate.domain.ports.repositories.genre_storage import GenreStorage
from filmorate.infrastructure.config.dependencies import get_genre_storage
from filmorate.presentation.params import IdPath

router = APIRouter(prefix="/genres", tags=["genres"])

GenreStorageDep = Annotated[GenreStorage, Depends(get_genre_storage)]


@router.get("", response_model=List[GenrePublic])
async def read_genres(genre_storage: GenreStorageDep):
    use_case = GetGenresUseCase(genre_storage)
    return await use_case.execute()


@router.get("/{genre_id}", response_model=GenrePublic)
async def read_genre(genre_id: IdPath, genre_storage: GenreStorageDep):
    use_case = GetGenreUseCase(genre_storage)
    return await use_case.execute(genre_id)
