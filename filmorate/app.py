import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from filmorate.applications.interfaces.dtos.message import Message
from filmorate.infrastructure.config.dependencies import get_settings
from filmorate.infrastructure.config.storage_backend import build_storage_backend
from filmorate.infrastructure.logging.logger import setup_logging
from filmorate.presentation.exception_handlers import register_exception_handlers
from filmorate.presentation.routers import films, genres, mpa, users

setup_logging(noisy_libs={"sqlalchemy.engine": logging.WARNING, "aiosqlite": logging.WARNING})


@asynccontextmanager
async def lifespan(app: FastAPI):
    backend = build_storage_backend(get_settings())
    await backend.start()
    app.state.storage_backend = backend
    try:
        yield
    finally:
        await backend.close()


app = FastAPI(title="Filmorate", lifespan=lifespan)

register_exception_handlers(app)

app.include_router(films.router)
app.include_router(users.router)
app.include_router(genres.router)
app.include_router(mpa.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Filmorate is running"}
