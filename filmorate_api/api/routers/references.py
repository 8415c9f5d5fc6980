from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Path

from filmorate_api.api.http_utils import handle_service_errors
from filmorate_api.dependencies import get_references_service
from filmorate_api.models.references import Genre, Mpa
from filmorate_api.services.references_service import ReferencesService

genres_router = APIRouter(prefix="/genres", tags=["genres"])
mpa_router = APIRouter(prefix="/mpa", tags=["mpa"])


@genres_router.get("", response_model=List[Genre], status_code=HTTPStatus.OK)
@handle_service_errors()
async def list_genres(
    svc: ReferencesService = Depends(get_references_service),
):
    return await svc.get_all_genres()


@genres_router.get("/{genre_id}",
                   response_model=Genre,
                   status_code=HTTPStatus.OK)
@handle_service_errors()
async def get_genre(
    genre_id: int = Path(...),
    svc: ReferencesService = Depends(get_references_service),
):
    return await svc.get_genre(genre_id)


@mpa_router.get("", response_model=List[Mpa], status_code=HTTPStatus.OK)
@handle_service_errors()
async def list_mpa(
    svc: ReferencesService = Depends(get_references_service),
):
    return await svc.get_all_mpa()


@mpa_router.get("/{mpa_id}", response_model=Mpa, status_code=HTTPStatus.OK)
@handle_service_errors()
async def get_mpa(
    mpa_id: int = Path(...),
    svc: ReferencesService = Depends(get_references_service),
):
    return await svc.get_mpa(mpa_id)
