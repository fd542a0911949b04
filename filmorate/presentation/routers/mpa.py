from typing import Annotated, List

from fastapi import APIRouter, Depends

from filmorate.applications.interfaces.dtos.lookup import MpaPublic
from filmorate.applications.use_cases.mpa.get_mpa import GetMpaUseCase
from filmorate.applications.use_cases.mpa.get_mpa_list import GetMpaListUseCase
from filmorate.domain.ports.repositories.mpa_storage import MpaStorage
from filmorate.infrastructure.config.dependencies import get_mpa_storage
from filmorate.presentation.params import IdPath

router = APIRouter(prefix="/mpa", tags=["mpa"])

MpaStorageDep = Annotated[MpaStorage, Depends(get_mpa_storage)]


@router.get("", response_model=List[MpaPublic])
async def read_mpa_list(mpa_storage: MpaStorageDep):
    use_case = GetMpaListUseCase(mpa_storage)
    return await use_case.execute()


@router.get("/{mpa_id}", response_model=MpaPublic)
async def read_mpa(mpa_id: IdPath, mpa_storage: MpaStorageDep):
    use_case = GetMpaUseCase(mpa_storage)
    return await use_case.execute(mpa_id)
