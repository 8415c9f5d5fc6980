from __future__ import annotations

from typing import Generic, Iterable, List, Optional, Type, TypeVar

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import BaseModel

M = TypeVar('M', bound=BaseModel)


class ReferencesRepo(Generic[M]):
    """Read-only lookup collection (genres, mpa) seeded at startup."""

    def __init__(
            self,
            db: AsyncIOMotorDatabase,
            collection: str,
            model: Type[M]) -> None:
        self._col = db[collection]
        self._name = collection
        self._model = model

    async def ensure_indexes(self) -> None:
        await self._col.create_index(
            [('id', 1)], unique=True, name=f'{self._name}_id')

    async def seed(self, items: Iterable[M]) -> None:
        """Upsert the canonical rows; existing names are overwritten."""
        for item in items:
            await self._col.update_one(
                {'id': item.id},
                {'$set': item.model_dump()},
                upsert=True,
            )

    async def get(self, entity_id: int) -> Optional[M]:
        doc = await self._col.find_one({'id': entity_id}, {'_id': 0})
        return None if doc is None else self._model.model_validate(doc)

    async def get_all(self) -> List[M]:
        cursor = self._col.find({}, {'_id': 0}).sort('id', 1)
        return [self._model.model_validate(doc) async for doc in cursor]
