from __future__ import annotations

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument


class SequencesRepo:
    """Monotonic integer ids backed by the ``counters`` collection."""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._col = db['counters']

    async def next_id(self, name: str) -> int:
        doc = await self._col.find_one_and_update(
            {'_id': name},
            {'$inc': {'seq': 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(doc['seq'])

    async def reset(self, name: str) -> None:
        await self._col.delete_one({'_id': name})
