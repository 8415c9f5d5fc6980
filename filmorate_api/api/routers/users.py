from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Path

from filmorate_api.api.http_utils import handle_service_errors
from filmorate_api.dependencies import get_users_service
from filmorate_api.models.edges import (
    BulkDeleteResponse,
    EdgeDeleteResponse,
    EdgePutResponse,
)
from filmorate_api.models.users import FriendItem, User
from filmorate_api.services.users_service import UsersService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[User], status_code=HTTPStatus.OK)
@handle_service_errors()
async def list_users(
    svc: UsersService = Depends(get_users_service),
):
    return await svc.get_all()


@router.get("/{user_id}", response_model=User, status_code=HTTPStatus.OK)
@handle_service_errors()
async def get_user(
    user_id: int = Path(...),
    svc: UsersService = Depends(get_users_service),
):
    return await svc.get(user_id)


@router.post("", response_model=User, status_code=HTTPStatus.OK)
@handle_service_errors()
async def create_user(
    body: User,
    svc: UsersService = Depends(get_users_service),
):
    return await svc.create(body)


@router.put("", response_model=User, status_code=HTTPStatus.OK)
@handle_service_errors()
async def update_user(
    body: User,
    svc: UsersService = Depends(get_users_service),
):
    return await svc.update(body)


@router.delete("",
               response_model=BulkDeleteResponse,
               status_code=HTTPStatus.OK)
@handle_service_errors()
async def delete_all_users(
    svc: UsersService = Depends(get_users_service),
):
    return BulkDeleteResponse(deleted=await svc.delete_all())


@router.delete("/{user_id}",
               response_model=EdgeDeleteResponse,
               status_code=HTTPStatus.OK)
@handle_service_errors()
async def delete_user(
    user_id: int = Path(...),
    svc: UsersService = Depends(get_users_service),
):
    return EdgeDeleteResponse(ok=True, deleted=await svc.delete(user_id))


@router.get("/{user_id}/friends",
            response_model=List[FriendItem],
            status_code=HTTPStatus.OK)
@handle_service_errors()
async def get_friends(
    user_id: int = Path(...),
    svc: UsersService = Depends(get_users_service),
):
    return await svc.get_friends(user_id)


@router.get("/{user_id}/friends/acknowledged",
            response_model=List[FriendItem],
            status_code=HTTPStatus.OK)
@handle_service_errors()
async def get_acknowledged_friends(
    user_id: int = Path(...),
    svc: UsersService = Depends(get_users_service),
):
    return await svc.get_acknowledged_friends(user_id)


@router.get("/{user_id}/friends/common/{other_id}",
            response_model=List[FriendItem],
            status_code=HTTPStatus.OK)
@handle_service_errors()
async def get_common_friends(
    user_id: int = Path(...),
    other_id: int = Path(...),
    svc: UsersService = Depends(get_users_service),
):
    return await svc.get_common_friends(user_id, other_id)


@router.put("/{user_id}/friends/{friend_id}",
            response_model=EdgePutResponse,
            status_code=HTTPStatus.OK)
@handle_service_errors()
async def add_friend(
    user_id: int = Path(...),
    friend_id: int = Path(...),
    svc: UsersService = Depends(get_users_service),
):
    return EdgePutResponse(ok=True,
                           created=await svc.add_friend(user_id, friend_id))


@router.delete("/{user_id}/friends/{friend_id}",
               response_model=EdgeDeleteResponse,
               status_code=HTTPStatus.OK)
@handle_service_errors()
async def delete_friend(
    user_id: int = Path(...),
    friend_id: int = Path(...),
    svc: UsersService = Depends(get_users_service),
):
    deleted = await svc.delete_friend(user_id, friend_id)
    return EdgeDeleteResponse(ok=True, deleted=deleted)
