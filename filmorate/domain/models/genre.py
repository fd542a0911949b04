from typing import Optional

from pydantic import BaseModel


class Genre(BaseModel):
    id: int
    name: Optional[str] = None
