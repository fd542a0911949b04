from http import HTTPStatus
from typing import Annotated, List

from fastapi import APIRouter, Depends

from filmorate.applications.interfaces.dtos.film import FilmPublic, FilmSchema, FilmUpdateSchema
from filmorate.applications.interfaces.dtos.message import Message
from filmorate.applications.services.film_service import FilmService
from filmorate.infrastructure.config.dependencies import get_film_service
from filmorate.presentation.params import CountQuery, IdPath

router = APIRouter(prefix="/films", tags=["films"])

FilmServiceDep = Annotated[FilmService, Depends(get_film_service)]


@router.post("", status_code=HTTPStatus.CREATED, response_model=FilmPublic)
async def create_film(film: FilmSchema, film_service: FilmServiceDep):
    created = await film_service.create(film.to_domain())
    return FilmPublic.from_domain(created)


@router.put("", response_model=FilmPublic)
async def update_film(film: FilmUpdateSchema, film_service: FilmServiceDep):
    updated = await film_service.update(film.id, film.to_patch())
    return FilmPublic.from_domain(updated)


@router.get("", response_model=List[FilmPublic])
async def read_films(film_service: FilmServiceDep):
    return [FilmPublic.from_domain(film) for film in await film_service.list_all()]


@router.get("/popular", response_model=List[FilmPublic])
async def read_popular_films(film_service: FilmServiceDep, count: CountQuery = None):
    films = await film_service.popular_films(count)
    return [FilmPublic.from_domain(film) for film in films]


@router.get("/{film_id}", response_model=FilmPublic)
async def read_film(film_id: IdPath, film_service: FilmServiceDep):
    return FilmPublic.from_domain(await film_service.get_by_id(film_id))


@router.put("/{film_id}/like/{user_id}", response_model=Message)
async def add_like(film_id: IdPath, user_id: IdPath, film_service: FilmServiceDep):
    await film_service.add_like(film_id, user_id)
    return Message(message=f"User {user_id} liked film {film_id}")


@router.delete("/{film_id}/like/{user_id}", response_model=Message)
async def remove_like(film_id: IdPath, user_id: IdPath, film_service: FilmServiceDep):
    await film_service.remove_like(film_id, user_id)
    return Message(message=f"User {user_id} no longer likes film {film_id}")
