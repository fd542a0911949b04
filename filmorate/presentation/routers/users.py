from http import HTTPStatus
from typing import Annotated, List

from fastapi import APIRouter, Depends

from filmorate.applications.interfaces.dtos.message import Message
from filmorate.applications.interfaces.dtos.user import UserPublic, UserSchema, UserUpdateSchema
from filmorate.applications.services.user_service import UserService
from filmorate.infrastructure.config.dependencies import get_user_service
from filmorate.presentation.params import IdPath

router = APIRouter(prefix="/users", tags=["users"])

UserServiceDep = Annotated[UserService, Depends(get_user_service)]


@router.post("", status_code=HTTPStatus.CREATED, response_model=UserPublic)
async def create_user(user: UserSchema, user_service: UserServiceDep):
    return UserPublic.from_domain(await user_service.create(user.to_domain()))


@router.put("", response_model=UserPublic)
async def update_user(user: UserUpdateSchema, user_service: UserServiceDep):
    return UserPublic.from_domain(await user_service.update(user.id, user.to_patch()))


@router.get("", response_model=List[UserPublic])
async def read_users(user_service: UserServiceDep):
    return [UserPublic.from_domain(user) for user in await user_service.list_all()]


@router.get("/{user_id}", response_model=UserPublic)
async def read_user(user_id: IdPath, user_service: UserServiceDep):
    return UserPublic.from_domain(await user_service.get_by_id(user_id))


@router.put("/{user_id}/friends/{friend_id}", response_model=Message)
async def add_friend(user_id: IdPath, friend_id: IdPath, user_service: UserServiceDep):
    friendship = await user_service.add_friend(user_id, friend_id)
    if friendship.confirmed:
        return Message(message=f"Users {user_id} and {friend_id} are now friends")
    return Message(message=f"Friend request sent from {user_id} to {friend_id}")


@router.delete("/{user_id}/friends/{friend_id}", response_model=Message)
async def remove_friend(user_id: IdPath, friend_id: IdPath, user_service: UserServiceDep):
    await user_service.remove_friend(user_id, friend_id)
    return Message(message=f"Users {user_id} and {friend_id} are no longer friends")


@router.get("/{user_id}/friends", response_model=List[UserPublic])
async def read_friends(user_id: IdPath, user_service: UserServiceDep):
    return [UserPublic.from_domain(user) for user in await user_service.get_friends(user_id)]


@router.get("/{user_id}/friends/common/{other_id}", response_model=List[UserPublic])
async def read_common_friends(user_id: IdPath, other_id: IdPath, user_service: UserServiceDep):
    return [UserPublic.from_domain(user) for user in await user_service.get_common_friends(user_id, other_id)]
