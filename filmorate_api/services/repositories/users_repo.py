"""In-memory repository for users."""

from typing import Optional

from filmorate_api.models.users import User
from filmorate_api.services.repositories.base_repo import InMemoryRepo


class UsersRepo(InMemoryRepo[User]):
    """Users keyed by id; owns the ``friends`` relation."""

    entity_name = "user"
    relation_field = "friends"

    def find_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup used for the email uniqueness check."""
        needle = email.casefold()
        for user in self.find_all():
            if user.email.casefold() == needle:
                return user
        return None
