from typing import Optional

from pydantic import BaseModel


class Mpa(BaseModel):
    id: int
    name: Optional[str] = None
