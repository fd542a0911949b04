from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str = "sqlite+aiosqlite:///./filmorate.db"
    DATABASE_ECHO: bool = False
    STORAGE_BACKEND: Literal["database", "memory"] = "database"
    POPULAR_FILMS_DEFAULT_COUNT: int = 10
