"""In-memory repository for films."""

from filmorate_api.models.films import Film
from filmorate_api.services.repositories.base_repo import InMemoryRepo


class FilmsRepo(InMemoryRepo[Film]):
    """Films keyed by id; owns the ``likes`` relation."""

    entity_name = "film"
    relation_field = "likes"
