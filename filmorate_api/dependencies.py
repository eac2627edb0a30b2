from fastapi import Depends

from filmorate_api.core.config import settings
from filmorate_api.db.memory import Storage, get_storage
from filmorate_api.services.films_service import FilmsService
from filmorate_api.services.users_service import UsersService


def get_db() -> Storage:
    # single access point to the in-memory repositories
    return get_storage()


def get_users_service(db: Storage = Depends(get_db)) -> UsersService:
    return UsersService(db.users)


def get_films_service(
        db: Storage = Depends(get_db),
        users: UsersService = Depends(get_users_service),
) -> FilmsService:
    # films only ask the user service whether a user exists
    return FilmsService(db.films, users,
                        popular_default_count=settings.popular_default_count)
