"""Read-only access to the genre and MPA lookup tables."""

from __future__ import annotations

from typing import List

from filmorate_api.models.references import Genre, Mpa
from filmorate_api.services.context import ServiceContext
from filmorate_api.services.helpers import require, storage_errors


class ReferencesService:
    def __init__(self, ctx: ServiceContext) -> None:
        self.genres = ctx.storages.genres
        self.mpa = ctx.storages.mpa

    @storage_errors('reference_get_genre')
    async def get_genre(self, genre_id: int) -> Genre:
        return require(await self.genres.get(genre_id), 'genre', genre_id)

    @storage_errors('reference_get_all_genres')
    async def get_all_genres(self) -> List[Genre]:
        return await self.genres.get_all()

    @storage_errors('reference_get_mpa')
    async def get_mpa(self, mpa_id: int) -> Mpa:
        return require(await self.mpa.get(mpa_id), 'mpa', mpa_id)

    @storage_errors('reference_get_all_mpa')
    async def get_all_mpa(self) -> List[Mpa]:
        return await self.mpa.get_all()
