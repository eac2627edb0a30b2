import logging
from http import HTTPStatus
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from filmorate_api.api.http_utils import ERRMAP, handle_domain_errors
from filmorate_api.dependencies import get_films_service
from filmorate_api.models.films import Film, FilmUpdateRequest
from filmorate_api.services.films_service import FilmsService

router = APIRouter(prefix="/films", tags=["films"])
log = logging.getLogger(__name__)


@router.get("", response_model=list[Film], status_code=HTTPStatus.OK)
async def list_films(
    svc: FilmsService = Depends(get_films_service),
) -> list[Film]:
    return svc.find_all()


# declared before /{film_id} so "popular" is not taken for an id
@router.get("/popular", response_model=list[Film],
            status_code=HTTPStatus.OK)
async def popular_films(
    count: Optional[int] = Query(
        None, description="how many films; missing or <= 0 means default"),
    svc: FilmsService = Depends(get_films_service),
) -> list[Film]:
    return svc.get_popular_films(count)


@router.get("/{film_id}", response_model=Film, status_code=HTTPStatus.OK)
@handle_domain_errors(ERRMAP)
async def get_film(
    film_id: int,
    svc: FilmsService = Depends(get_films_service),
):
    return svc.get_film_by_id(film_id)


@router.post("", response_model=Film, status_code=HTTPStatus.CREATED)
@handle_domain_errors(ERRMAP)
async def create_film(
    body: Film,
    svc: FilmsService = Depends(get_films_service),
):
    film = svc.create(body)
    log.info("film_created", extra={"film_id": film.id})
    return film


@router.put("", response_model=Film, status_code=HTTPStatus.OK)
@handle_domain_errors(ERRMAP)
async def update_film(
    body: FilmUpdateRequest,
    svc: FilmsService = Depends(get_films_service),
):
    film = svc.update(body)
    log.info("film_updated", extra={"film_id": film.id})
    return film


@router.put("/{film_id}/like/{user_id}",
            status_code=HTTPStatus.NO_CONTENT)
@handle_domain_errors(ERRMAP)
async def add_like(
    film_id: int,
    user_id: int,
    svc: FilmsService = Depends(get_films_service),
):
    svc.add_like(film_id, user_id)
    log.info("like_added", extra={"film_id": film_id, "user_id": user_id})
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.delete("/{film_id}/like/{user_id}",
               status_code=HTTPStatus.NO_CONTENT)
@handle_domain_errors(ERRMAP)
async def remove_like(
    film_id: int,
    user_id: int,
    svc: FilmsService = Depends(get_films_service),
):
    svc.remove_like(film_id, user_id)
    log.info("like_removed", extra={"film_id": film_id, "user_id": user_id})
    return Response(status_code=HTTPStatus.NO_CONTENT)
