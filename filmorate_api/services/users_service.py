"""Service layer for users and their (symmetric) friendships."""

from __future__ import annotations

from datetime import date

from filmorate_api.core.exceptions import NotFoundError, ValidationError
from filmorate_api.models.users import User, UserUpdateRequest
from filmorate_api.services.repositories.users_repo import UsersRepo

EMAIL_IN_USE = "email already in use"


class UsersService:
    """Validation, email uniqueness and friendship bookkeeping."""

    def __init__(self, repo: UsersRepo) -> None:
        """Init with the user repository."""
        self.repo = repo

    # ---------- CREATE / UPDATE ----------

    def create(self, user: User) -> User:
        """Validate and store a new user with an empty friend set."""
        self._validate(user)
        with self.repo.lock:
            if self.repo.find_by_email(user.email) is not None:
                raise ValidationError(EMAIL_IN_USE)
            return self.repo.create(self._with_default_name(user))

    def update(self, patch: UserUpdateRequest) -> User:
        """Merge the populated fields of ``patch`` onto the stored user."""
        with self.repo.lock:
            existing = self.get_user_by_id(patch.id)
            user = existing.model_copy(
                update=patch.model_dump(exclude_unset=True, exclude_none=True,
                                        exclude={"id"}),
            )
            self._validate(user)

            owner = self.repo.find_by_email(user.email)
            if owner is not None and owner.id != user.id:
                raise ValidationError(EMAIL_IN_USE)

            user = self._with_default_name(user)
            user.friends = set(existing.friends)
            return self.repo.update(user)

    # ---------- READ ----------

    def find_all(self) -> list[User]:
        return self.repo.find_all()

    def get_user_by_id(self, user_id: int) -> User:
        user = self.repo.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"user with id={user_id} not found")
        return user

    # ---------- FRIENDS ----------

    def add_friend(self, user_id: int, friend_id: int) -> None:
        """Make the two users friends of each other.

        Two single-sided updates; the store lock is held across both so
        no other request can observe the friendship half-written.
        Befriending oneself is rejected with ValidationError once both
        ids are known to exist.
        """
        with self.repo.lock:
            user = self.get_user_by_id(user_id)
            friend = self.get_user_by_id(friend_id)
            if user_id == friend_id:
                raise ValidationError("user cannot befriend themselves")
            self.repo.update(user, related=user.friends | {friend_id})
            self.repo.update(friend, related=friend.friends | {user_id})

    def remove_friend(self, user_id: int, friend_id: int) -> None:
        """Drop the friendship on both sides; absent links are ignored.

        Unlike add_friend, equal ids are not an error: there is no
        self-friendship to remove, so the call is a no-op.
        """
        with self.repo.lock:
            user = self.get_user_by_id(user_id)
            friend = self.get_user_by_id(friend_id)
            self.repo.update(user, related=user.friends - {friend_id})
            self.repo.update(friend, related=friend.friends - {user_id})

    def get_friends(self, user_id: int) -> list[User]:
        user = self.get_user_by_id(user_id)
        return [self.get_user_by_id(fid) for fid in user.friends]

    def get_common_friends(self, user_id: int, other_id: int) -> list[User]:
        """Friends shared by both users, in the first user's order."""
        user = self.get_user_by_id(user_id)
        other = self.get_user_by_id(other_id)
        return [self.get_user_by_id(fid)
                for fid in user.friends if fid in other.friends]

    # ---------- helpers ----------

    @staticmethod
    def _with_default_name(user: User) -> User:
        if user.name is None or not user.name.strip():
            return user.model_copy(update={"name": user.login})
        return user

    @staticmethod
    def _validate(user: User) -> None:
        if "@" not in user.email:
            raise ValidationError("email must contain '@'")
        if not user.login or any(ch.isspace() for ch in user.login):
            raise ValidationError(
                "login must not be empty or contain whitespace")
        if user.birthday > date.today():
            raise ValidationError("birthday cannot be in the future")
