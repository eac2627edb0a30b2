from __future__ import annotations

from datetime import date

from pydantic import Field

from filmorate_api.models.common import CamelModel


class Film(CamelModel):
    id: int | None = None
    name: str
    description: str
    release_date: date
    duration: int = Field(..., description="minutes")
    likes: set[int] = Field(default_factory=set,
                            description="ids of users who liked the film")


class FilmUpdateRequest(CamelModel):
    """PUT /films body: only ``id`` is required, the rest is merged."""

    id: int
    name: str | None = None
    description: str | None = None
    release_date: date | None = None
    duration: int | None = None
