from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Path, Query

from filmorate_api.api.http_utils import handle_service_errors
from filmorate_api.dependencies import get_films_service
from filmorate_api.models.edges import (
    BulkDeleteResponse,
    EdgeDeleteResponse,
    EdgePutResponse,
    FilmLikesResponse,
)
from filmorate_api.models.films import Film
from filmorate_api.services.films_service import FilmsService

router = APIRouter(prefix="/films", tags=["films"])


@router.get("", response_model=List[Film], status_code=HTTPStatus.OK)
@handle_service_errors()
async def list_films(
    svc: FilmsService = Depends(get_films_service),
):
    return await svc.get_all()


# declared before /{film_id} so "popular" is not parsed as an id
@router.get("/popular", response_model=List[Film], status_code=HTTPStatus.OK)
@handle_service_errors()
async def popular_films(
    count: int = Query(10, description="how many films to return"),
    svc: FilmsService = Depends(get_films_service),
):
    return await svc.get_top_films(count)


@router.get("/{film_id}", response_model=Film, status_code=HTTPStatus.OK)
@handle_service_errors()
async def get_film(
    film_id: int = Path(...),
    svc: FilmsService = Depends(get_films_service),
):
    return await svc.get(film_id)


@router.post("", response_model=Film, status_code=HTTPStatus.OK)
@handle_service_errors()
async def create_film(
    body: Film,
    svc: FilmsService = Depends(get_films_service),
):
    return await svc.create(body)


@router.put("", response_model=Film, status_code=HTTPStatus.OK)
@handle_service_errors()
async def update_film(
    body: Film,
    svc: FilmsService = Depends(get_films_service),
):
    return await svc.update(body)


@router.delete("",
               response_model=BulkDeleteResponse,
               status_code=HTTPStatus.OK)
@handle_service_errors()
async def delete_all_films(
    svc: FilmsService = Depends(get_films_service),
):
    return BulkDeleteResponse(deleted=await svc.delete_all())


@router.delete("/{film_id}",
               response_model=EdgeDeleteResponse,
               status_code=HTTPStatus.OK)
@handle_service_errors()
async def delete_film(
    film_id: int = Path(...),
    svc: FilmsService = Depends(get_films_service),
):
    return EdgeDeleteResponse(ok=True, deleted=await svc.delete(film_id))


@router.get("/{film_id}/likes",
            response_model=FilmLikesResponse,
            status_code=HTTPStatus.OK)
@handle_service_errors()
async def get_film_likes(
    film_id: int = Path(...),
    svc: FilmsService = Depends(get_films_service),
):
    user_ids = await svc.get_likes(film_id)
    return FilmLikesResponse(film_id=film_id,
                             user_ids=user_ids,
                             total=len(user_ids))


@router.put("/{film_id}/like/{user_id}",
            response_model=EdgePutResponse,
            status_code=HTTPStatus.OK)
@handle_service_errors()
async def add_like(
    film_id: int = Path(...),
    user_id: int = Path(...),
    svc: FilmsService = Depends(get_films_service),
):
    return EdgePutResponse(ok=True,
                           created=await svc.add_like(film_id, user_id))


@router.delete("/{film_id}/like/{user_id}",
               response_model=EdgeDeleteResponse,
               status_code=HTTPStatus.OK)
@handle_service_errors()
async def delete_like(
    film_id: int = Path(...),
    user_id: int = Path(...),
    svc: FilmsService = Depends(get_films_service),
):
    return EdgeDeleteResponse(ok=True,
                              deleted=await svc.delete_like(film_id, user_id))
