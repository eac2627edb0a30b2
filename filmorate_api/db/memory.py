import logging
from dataclasses import dataclass, field

from filmorate_api.services.repositories.films_repo import FilmsRepo
from filmorate_api.services.repositories.users_repo import UsersRepo


@dataclass
class Storage:
    films: FilmsRepo = field(default_factory=FilmsRepo)
    users: UsersRepo = field(default_factory=UsersRepo)


_storage: Storage | None = None


def get_storage() -> Storage:
    """
    Process-wide singleton with the film and user repositories.
    """
    global _storage
    if _storage is None:
        _storage = Storage()
        logging.getLogger(__name__).info("storage_initialized")
    return _storage


def close_storage() -> None:
    """Forget all stored data; the next get_storage() starts empty."""
    global _storage
    _storage = None
