"""Service layer for films, their likes and the popularity ranking."""

from __future__ import annotations

from typing import Dict, Iterable, List, Set

from filmorate_api.models.films import (
    CINEMA_BIRTHDAY, DESCRIPTION_MAX_LENGTH, Film
)
from filmorate_api.services.context import ServiceContext
from filmorate_api.services.errors import ObjectAlreadyExists, ObjectNotFound
from filmorate_api.services.helpers import (
    positive_count, reject, require, storage_errors
)


class FilmsService:
    """CRUD for films plus the film <-> user like relation.

    Likes are stored as separate edges; every film leaving this service is
    hydrated with its like set and the names of its genres and MPA rating.
    """

    def __init__(self, ctx: ServiceContext) -> None:
        self.films = ctx.storages.films
        self.likes = ctx.storages.likes
        self.genres = ctx.storages.genres
        self.mpa = ctx.storages.mpa
        self.log = ctx.log.getChild('films')

    # ----- READ -----

    @storage_errors('film_get')
    async def get(self, film_id: int) -> Film:
        film = require(await self.films.get(film_id), 'film', film_id)
        likes = {film_id: await self.likes.user_ids(film_id)}
        return (await self._hydrate([film], likes))[0]

    @storage_errors('film_get_all')
    async def get_all(self) -> List[Film]:
        return await self._hydrate(
            await self.films.get_all(), await self.likes.by_film())

    # ----- WRITE -----

    @storage_errors('film_create')
    async def create(self, film: Film) -> Film:
        """Validate and store a new film with the likes it carries."""
        film = await self._validate(film)
        created = await self.films.create(self._bare(film))
        if created is None:
            self.log.error('film_already_exists', extra={'film_id': film.id})
            raise ObjectAlreadyExists.of('film', film.id)
        for user_id in film.likes:
            await self.likes.add(created.id, user_id)
        self.log.info('film_created', extra={'film_id': created.id})
        return await self.get(created.id)

    @storage_errors('film_update')
    async def update(self, film: Film) -> Film:
        """Replace a film, its genres and its like set."""
        film = await self._validate(film)
        updated = await self.films.update(self._bare(film))
        if updated is None:
            self.log.error('film_not_found', extra={'film_id': film.id})
            raise ObjectNotFound.of('film', film.id)
        await self.likes.delete_by_film(film.id)
        for user_id in film.likes:
            await self.likes.add(film.id, user_id)
        self.log.info('film_updated', extra={'film_id': film.id})
        return await self.get(film.id)

    @storage_errors('film_delete')
    async def delete(self, film_id: int) -> bool:
        deleted = await self.films.delete(film_id)
        if deleted:
            await self.likes.delete_by_film(film_id)
            self.log.info('film_deleted', extra={'film_id': film_id})
        else:
            self.log.warning('film_already_absent', extra={'film_id': film_id})
        return deleted

    @storage_errors('film_delete_all')
    async def delete_all(self) -> int:
        count = await self.films.delete_all()
        await self.likes.delete_all()
        self.log.info('films_deleted', extra={'count': count})
        return count

    # ----- LIKES -----

    @storage_errors('film_add_like')
    async def add_like(self, film_id: int, user_id: int) -> bool:
        """Idempotent; True if the like is new."""
        await self._require_film(film_id)
        self._require_user_id(user_id)
        created = await self.likes.add(film_id, user_id)
        if created:
            self.log.info('like_added',
                          extra={'film_id': film_id, 'user_id': user_id})
        else:
            self.log.warning('like_already_exists',
                             extra={'film_id': film_id, 'user_id': user_id})
        return created

    @storage_errors('film_delete_like')
    async def delete_like(self, film_id: int, user_id: int) -> bool:
        """Idempotent; False if there was no such like."""
        await self._require_film(film_id)
        self._require_user_id(user_id)
        deleted = await self.likes.remove(film_id, user_id)
        if deleted:
            self.log.info('like_deleted',
                          extra={'film_id': film_id, 'user_id': user_id})
        else:
            self.log.warning('like_absent',
                             extra={'film_id': film_id, 'user_id': user_id})
        return deleted

    @storage_errors('film_get_likes')
    async def get_likes(self, film_id: int) -> List[int]:
        await self._require_film(film_id)
        return sorted(await self.likes.user_ids(film_id))

    @storage_errors('film_get_top_films')
    async def get_top_films(self, count: int = 10) -> List[Film]:
        """Top ``count`` films by likes; ties go to the lower id.

        Films without likes take part in the ranking too.
        """
        positive_count(self.log, count)
        likes = await self.likes.by_film()
        films = sorted(
            await self.films.get_all(),
            key=lambda f: (-len(likes.get(f.id, ())), f.id),
        )
        return await self._hydrate(films[:count], likes)

    # ----- helpers -----

    async def _validate(self, film: Film) -> Film:
        """Apply domain rules and canonicalize references.

        Duplicate genres collapse into one, sorted by id; unknown genre or
        MPA ids raise ObjectNotFound. Nothing is written before this passes.
        """
        if film.description is not None \
                and len(film.description) > DESCRIPTION_MAX_LENGTH:
            reject(self.log,
                   f'description must not exceed '
                   f'{DESCRIPTION_MAX_LENGTH} characters')
        if film.release_date < CINEMA_BIRTHDAY:
            reject(self.log,
                   f'release date must not be before {CINEMA_BIRTHDAY}',
                   release_date=str(film.release_date))
        for user_id in film.likes:
            self._require_user_id(user_id)

        genres = []
        for genre_id in sorted({g.id for g in film.genres}):
            genres.append(
                require(await self.genres.get(genre_id), 'genre', genre_id))
        mpa = film.mpa
        if mpa is not None:
            mpa = require(await self.mpa.get(mpa.id), 'mpa', mpa.id)
        return film.model_copy(update={'genres': genres, 'mpa': mpa})

    async def _require_film(self, film_id: int) -> None:
        if not await self.films.contains(film_id):
            self.log.error('film_not_found', extra={'film_id': film_id})
            raise ObjectNotFound.of('film', film_id)

    def _require_user_id(self, user_id: int) -> None:
        # only the shape of the id is checked, users are not looked up
        if user_id <= 0:
            self.log.error('user_not_found', extra={'user_id': user_id})
            raise ObjectNotFound.of('user', user_id)

    @staticmethod
    def _bare(film: Film) -> Film:
        return film.model_copy(update={'likes': set()})

    async def _hydrate(
        self,
        films: Iterable[Film],
        likes: Dict[int, Set[int]],
    ) -> List[Film]:
        genre_names = {g.id: g for g in await self.genres.get_all()}
        mpa_names = {m.id: m for m in await self.mpa.get_all()}
        result = []
        for film in films:
            update = {
                'likes': set(likes.get(film.id, ())),
                'genres': [genre_names.get(g.id, g) for g in film.genres],
            }
            if film.mpa is not None:
                update['mpa'] = mpa_names.get(film.mpa.id, film.mpa)
            result.append(film.model_copy(update=update))
        return result
