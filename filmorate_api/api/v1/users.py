import logging
from http import HTTPStatus

from fastapi import APIRouter, Depends, Response

from filmorate_api.api.http_utils import ERRMAP, handle_domain_errors
from filmorate_api.dependencies import get_users_service
from filmorate_api.models.users import User, UserUpdateRequest
from filmorate_api.services.users_service import UsersService

router = APIRouter(prefix="/users", tags=["users"])
log = logging.getLogger(__name__)


@router.get("", response_model=list[User], status_code=HTTPStatus.OK)
async def list_users(
    svc: UsersService = Depends(get_users_service),
) -> list[User]:
    return svc.find_all()


@router.get("/{user_id}", response_model=User, status_code=HTTPStatus.OK)
@handle_domain_errors(ERRMAP)
async def get_user(
    user_id: int,
    svc: UsersService = Depends(get_users_service),
):
    return svc.get_user_by_id(user_id)


@router.post("", response_model=User, status_code=HTTPStatus.CREATED)
@handle_domain_errors(ERRMAP)
async def create_user(
    body: User,
    svc: UsersService = Depends(get_users_service),
):
    user = svc.create(body)
    log.info("user_created", extra={"user_id": user.id})
    return user


@router.put("", response_model=User, status_code=HTTPStatus.OK)
@handle_domain_errors(ERRMAP)
async def update_user(
    body: UserUpdateRequest,
    svc: UsersService = Depends(get_users_service),
):
    user = svc.update(body)
    log.info("user_updated", extra={"user_id": user.id})
    return user


# 400 when user_id == friend_id; DELETE with equal ids is a no-op
@router.put("/{user_id}/friends/{friend_id}",
            status_code=HTTPStatus.NO_CONTENT)
@handle_domain_errors(ERRMAP)
async def add_friend(
    user_id: int,
    friend_id: int,
    svc: UsersService = Depends(get_users_service),
):
    svc.add_friend(user_id, friend_id)
    log.info("friend_added",
             extra={"user_id": user_id, "friend_id": friend_id})
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.delete("/{user_id}/friends/{friend_id}",
               status_code=HTTPStatus.NO_CONTENT)
@handle_domain_errors(ERRMAP)
async def remove_friend(
    user_id: int,
    friend_id: int,
    svc: UsersService = Depends(get_users_service),
):
    svc.remove_friend(user_id, friend_id)
    log.info("friend_removed",
             extra={"user_id": user_id, "friend_id": friend_id})
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.get("/{user_id}/friends", response_model=list[User],
            status_code=HTTPStatus.OK)
@handle_domain_errors(ERRMAP)
async def list_friends(
    user_id: int,
    svc: UsersService = Depends(get_users_service),
):
    return svc.get_friends(user_id)


@router.get("/{user_id}/friends/common/{other_id}",
            response_model=list[User], status_code=HTTPStatus.OK)
@handle_domain_errors(ERRMAP)
async def list_common_friends(
    user_id: int,
    other_id: int,
    svc: UsersService = Depends(get_users_service),
):
    return svc.get_common_friends(user_id, other_id)
