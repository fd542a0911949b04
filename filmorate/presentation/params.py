from typing import Annotated, Optional

from fastapi import Path, Query

from filmorate.applications.interfaces.dtos.base import INT32_MAX, INT32_MIN

IdPath = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]
CountQuery = Annotated[Optional[int], Query(gt=0, le=INT32_MAX)]
