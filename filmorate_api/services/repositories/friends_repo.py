"""Mongo repository for directed friend edges."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, Set

from motor.motor_asyncio import AsyncIOMotorDatabase


class FriendsRepo:
    """One document per edge: ``{user_id, friend_id, created_at}``."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._col = db['friends']

    async def ensure_indexes(self) -> None:
        await self._col.create_index(
            [('user_id', 1), ('friend_id', 1)],
            unique=True,
            name='friends_user_friend',
        )
        await self._col.create_index(
            [('friend_id', 1)], name='friends_friend_id')

    async def add(self, user_id: int, friend_id: int) -> bool:
        """Upsert the edge; True only if it was inserted now."""
        now = datetime.now(timezone.utc)
        res = await self._col.update_one(
            {'user_id': user_id, 'friend_id': friend_id},
            {'$setOnInsert': {'created_at': now}},
            upsert=True,
        )
        return res.upserted_id is not None

    async def remove(self, user_id: int, friend_id: int) -> bool:
        res = await self._col.delete_one(
            {'user_id': user_id, 'friend_id': friend_id})
        return res.deleted_count == 1

    async def friend_ids(self, user_id: int) -> Set[int]:
        return set(await self._col.distinct(
            'friend_id', {'user_id': user_id}))

    async def follower_ids(self, user_id: int) -> Set[int]:
        return set(await self._col.distinct(
            'user_id', {'friend_id': user_id}))

    async def adjacency(self) -> Dict[int, Set[int]]:
        edges: Dict[int, Set[int]] = defaultdict(set)
        cursor = self._col.find({}, {'_id': 0, 'user_id': 1, 'friend_id': 1})
        async for doc in cursor:
            edges[doc['user_id']].add(doc['friend_id'])
        return dict(edges)

    async def delete_outgoing(self, user_id: int) -> None:
        await self._col.delete_many({'user_id': user_id})

    async def delete_incoming(self, user_id: int) -> None:
        await self._col.delete_many({'friend_id': user_id})

    async def delete_all(self) -> None:
        await self._col.delete_many({})
