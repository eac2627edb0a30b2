from __future__ import annotations

from datetime import date

from pydantic import Field

from filmorate_api.models.common import CamelModel


class User(CamelModel):
    id: int | None = None
    email: str
    login: str
    name: str | None = None  # falls back to login
    birthday: date
    friends: set[int] = Field(default_factory=set)


class UserUpdateRequest(CamelModel):
    id: int
    email: str | None = None
    login: str | None = None
    name: str | None = None
    birthday: date | None = None
