"""Mongo repository for likes collection."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Set

from motor.motor_asyncio import AsyncIOMotorDatabase


class LikesRepo:
    """Set of (film_id, user_id) pairs."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._col = db['likes']

    async def ensure_indexes(self) -> None:
        """Create indexes: unique (film_id, user_id) and user_id filter."""
        await self._col.create_index(
            [('film_id', 1), ('user_id', 1)],
            unique=True,
            name='likes_film_user',
        )
        await self._col.create_index(
            [('user_id', 1)], name='likes_user_id')

    async def add(self, film_id: int, user_id: int) -> bool:
        """Idempotently add a like; True if it did not exist before."""
        now = datetime.now(timezone.utc)
        res = await self._col.update_one(
            {'film_id': film_id, 'user_id': user_id},
            {'$setOnInsert': {'created_at': now}},
            upsert=True,
        )
        return res.upserted_id is not None

    async def remove(self, film_id: int, user_id: int) -> bool:
        res = await self._col.delete_one(
            {'film_id': film_id, 'user_id': user_id})
        return res.deleted_count == 1

    async def user_ids(self, film_id: int) -> Set[int]:
        return set(await self._col.distinct(
            'user_id', {'film_id': film_id}))

    async def by_film(self) -> Dict[int, Set[int]]:
        """Group likes per film in one aggregation round-trip."""
        pipeline = [
            {'$group': {'_id': '$film_id', 'users': {'$addToSet': '$user_id'}}},
        ]
        docs = await self._col.aggregate(pipeline).to_list(length=None)
        return {int(doc['_id']): set(doc['users']) for doc in docs}

    async def delete_by_film(self, film_id: int) -> None:
        await self._col.delete_many({'film_id': film_id})

    async def delete_by_user(self, user_id: int) -> None:
        await self._col.delete_many({'user_id': user_id})

    async def delete_all(self) -> None:
        await self._col.delete_many({})
