"""Service layer for films, likes and the popularity ranking."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from filmorate_api.core.config import settings
from filmorate_api.core.exceptions import NotFoundError, ValidationError
from filmorate_api.models.films import Film, FilmUpdateRequest
from filmorate_api.models.users import User
from filmorate_api.services.repositories.films_repo import FilmsRepo

# first public film screening
MIN_RELEASE_DATE = date(1895, 12, 28)
MAX_DESCRIPTION_LENGTH = 200


class UserLookup(Protocol):
    """What the film service needs to know about users."""

    def get_user_by_id(self, user_id: int) -> User:
        """Return the user or raise NotFoundError."""


class FilmsService:
    """CRUD over films plus likes from existing users."""

    def __init__(
            self,
            repo: FilmsRepo,
            users: UserLookup,
            popular_default_count: Optional[int] = None) -> None:
        """Init with the film repository and a user lookup."""
        self.repo = repo
        self.users = users
        self.popular_default_count = (popular_default_count
                                      or settings.popular_default_count)

    # ---------- CREATE / UPDATE ----------

    def create(self, film: Film) -> Film:
        """Validate and store a new film with no likes."""
        self._validate(film)
        return self.repo.create(film)

    def update(self, patch: FilmUpdateRequest) -> Film:
        """Merge the populated fields of ``patch`` onto the stored film.

        Likes are never touched here, only by add_like/remove_like.
        """
        with self.repo.lock:
            existing = self.get_film_by_id(patch.id)
            film = existing.model_copy(
                update=patch.model_dump(exclude_unset=True, exclude_none=True,
                                        exclude={"id"}),
            )
            self._validate(film)
            film.likes = set(existing.likes)
            return self.repo.update(film)

    # ---------- READ ----------

    def find_all(self) -> list[Film]:
        return self.repo.find_all()

    def get_film_by_id(self, film_id: int) -> Film:
        film = self.repo.find_by_id(film_id)
        if film is None:
            raise NotFoundError(f"film with id={film_id} not found")
        return film

    def get_popular_films(self, count: Optional[int] = None) -> list[Film]:
        """Films with the most likes first; ties keep insertion order."""
        limit = count if count is not None and count > 0 \
            else self.popular_default_count
        films = sorted(self.repo.find_all(),
                       key=lambda f: len(f.likes), reverse=True)
        return films[:limit]

    # ---------- LIKES ----------

    def add_like(self, film_id: int, user_id: int) -> Film:
        """Register a like; liking twice changes nothing."""
        with self.repo.lock:
            film = self.get_film_by_id(film_id)
            self.users.get_user_by_id(user_id)
            return self.repo.update(film, related=film.likes | {user_id})

    def remove_like(self, film_id: int, user_id: int) -> Film:
        """Withdraw a like; a missing like is not an error."""
        with self.repo.lock:
            film = self.get_film_by_id(film_id)
            self.users.get_user_by_id(user_id)
            return self.repo.update(film, related=film.likes - {user_id})

    # ---------- helpers ----------

    @staticmethod
    def _validate(film: Film) -> None:
        if not film.name or not film.name.strip():
            raise ValidationError("film name must not be blank")
        if not film.description or not film.description.strip():
            raise ValidationError("film description must not be blank")
        if len(film.description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                "film description cannot exceed "
                f"{MAX_DESCRIPTION_LENGTH} characters")
        if film.release_date < MIN_RELEASE_DATE:
            raise ValidationError(
                "release date cannot be earlier than 28 December 1895")
        if film.duration <= 0:
            raise ValidationError("film duration must be positive")
