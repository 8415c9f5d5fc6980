from __future__ import annotations

from typing import List

from pydantic import BaseModel


class EdgePutResponse(BaseModel):
    ok: bool
    created: bool


class EdgeDeleteResponse(BaseModel):
    ok: bool
    deleted: bool


class BulkDeleteResponse(BaseModel):
    deleted: int


class FilmLikesResponse(BaseModel):
    film_id: int
    user_ids: List[int]
    total: int
