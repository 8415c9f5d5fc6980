"""Storage bundle and the context object handed to every service."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from motor.motor_asyncio import AsyncIOMotorDatabase

from filmorate_api.models.films import Film
from filmorate_api.models.references import GENRES, MPA_RATINGS, Genre, Mpa
from filmorate_api.models.users import User
from filmorate_api.services.repositories.base import (
    FriendsStore,
    LikesStore,
    ReferenceRepository,
    Repository,
)
from filmorate_api.services.repositories.documents_repo import DocumentsRepo
from filmorate_api.services.repositories.friends_repo import FriendsRepo
from filmorate_api.services.repositories.likes_repo import LikesRepo
from filmorate_api.services.repositories.memory_repo import (
    MemoryFriendsRepo,
    MemoryLikesRepo,
    MemoryReferenceRepo,
    MemoryRepo,
)
from filmorate_api.services.repositories.references_repo import ReferencesRepo


@dataclass
class Storages:
    films: Repository[Film]
    users: Repository[User]
    friends: FriendsStore
    likes: LikesStore
    genres: ReferenceRepository[Genre]
    mpa: ReferenceRepository[Mpa]


@dataclass
class ServiceContext:
    storages: Storages
    log: logging.Logger


def memory_storages() -> Storages:
    return Storages(
        films=MemoryRepo[Film](),
        users=MemoryRepo[User](),
        friends=MemoryFriendsRepo(),
        likes=MemoryLikesRepo(),
        genres=MemoryReferenceRepo(GENRES),
        mpa=MemoryReferenceRepo(MPA_RATINGS),
    )


async def mongo_storages(db: AsyncIOMotorDatabase) -> Storages:
    """Build Mongo-backed storages, ensure indexes and seed lookups."""
    films = DocumentsRepo(db, 'films', Film, frozenset({'likes'}))
    users = DocumentsRepo(db, 'users', User, frozenset({'friends'}))
    friends = FriendsRepo(db)
    likes = LikesRepo(db)
    genres = ReferencesRepo(db, 'genres', Genre)
    mpa = ReferencesRepo(db, 'mpa', Mpa)

    for repo in (films, users, friends, likes, genres, mpa):
        await repo.ensure_indexes()
    await genres.seed(GENRES)
    await mpa.seed(MPA_RATINGS)

    return Storages(
        films=films,
        users=users,
        friends=friends,
        likes=likes,
        genres=genres,
        mpa=mpa,
    )
