from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schemas exchanged as camelCase JSON (``releaseDate``) but used with snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# Bounds of the relational id and duration columns (32-bit INTEGER).
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
TEXT_MAX_LENGTH = 255

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
