import uuid
from datetime import date
from typing import Any, Dict

from httpx import AsyncClient

from filmorate_api.models.films import Film
from filmorate_api.models.users import User


def film_payload(**overrides: Any) -> Dict[str, Any]:
    body = {
        "name": "Film " + uuid.uuid4().hex[:6],
        "description": "A film about things",
        "releaseDate": "2000-01-01",
        "duration": 120,
    }
    body.update(overrides)
    return body


def user_payload(**overrides: Any) -> Dict[str, Any]:
    login = "u" + uuid.uuid4().hex[:8]
    body = {
        "email": f"{login}@mail.test",
        "login": login,
        "name": "Some User",
        "birthday": "1990-01-01",
    }
    body.update(overrides)
    return body


def make_film(**overrides: Any) -> Film:
    fields = {
        "name": "Valid Film",
        "description": "Valid description",
        "release_date": date(2000, 1, 1),
        "duration": 120,
    }
    fields.update(overrides)
    return Film(**fields)


def make_user(**overrides: Any) -> User:
    login = "u" + uuid.uuid4().hex[:8]
    fields = {
        "email": f"{login}@mail.test",
        "login": login,
        "name": "Test User",
        "birthday": date(1990, 1, 1),
    }
    fields.update(overrides)
    return User(**fields)


async def create_film(client: AsyncClient, **overrides: Any) -> dict:
    r = await client.post("/films", json=film_payload(**overrides))
    assert r.status_code == 201, r.text
    return r.json()


async def create_user(client: AsyncClient, **overrides: Any) -> dict:
    r = await client.post("/users", json=user_payload(**overrides))
    assert r.status_code == 201, r.text
    return r.json()
