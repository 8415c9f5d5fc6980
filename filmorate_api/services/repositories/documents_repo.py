"""Mongo repository for id-keyed entities (films, users)."""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError
from pydantic import BaseModel

from .sequences_repo import SequencesRepo

M = TypeVar('M', bound=BaseModel)


class DocumentsRepo(Generic[M]):
    """CRUD for one collection of pydantic models.

    ``edge_fields`` are the model fields kept in their own edge collections
    (likes, friends); they are never written into the entity document.
    """

    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        collection: str,
        model: Type[M],
        edge_fields: frozenset[str] = frozenset(),
    ) -> None:
        self._col = db[collection]
        self._name = collection
        self._model = model
        self._edge_fields = set(edge_fields)
        self._seq = SequencesRepo(db)

    async def ensure_indexes(self) -> None:
        await self._col.create_index(
            [('id', 1)], unique=True, name=f'{self._name}_id')

    def _to_doc(self, entity: M) -> Dict[str, Any]:
        # mode="json" turns dates into ISO strings, BSON has no date type
        return entity.model_dump(mode='json', exclude=self._edge_fields)

    def _from_doc(self, doc: Dict[str, Any]) -> M:
        return self._model.model_validate(doc)

    async def get(self, entity_id: int) -> Optional[M]:
        doc = await self._col.find_one({'id': entity_id}, {'_id': 0})
        return None if doc is None else self._from_doc(doc)

    async def get_all(self) -> List[M]:
        cursor = self._col.find({}, {'_id': 0}).sort('id', 1)
        return [self._from_doc(doc) async for doc in cursor]

    async def contains(self, entity_id: int) -> bool:
        return await self._col.count_documents(
            {'id': entity_id}, limit=1) > 0

    async def create(self, entity: M) -> Optional[M]:
        if entity.id and await self.contains(entity.id):
            return None
        new_id = await self._seq.next_id(self._name)
        created = entity.model_copy(update={'id': new_id}, deep=True)
        try:
            await self._col.insert_one(self._to_doc(created))
        except DuplicateKeyError:
            # id taken between the check and the insert
            return None
        return created

    async def update(self, entity: M) -> Optional[M]:
        result = await self._col.replace_one(
            {'id': entity.id}, self._to_doc(entity))
        return entity if result.matched_count == 1 else None

    async def delete(self, entity_id: int) -> bool:
        result = await self._col.delete_one({'id': entity_id})
        return result.deleted_count == 1

    async def delete_all(self) -> int:
        result = await self._col.delete_many({})
        await self._seq.reset(self._name)
        return result.deleted_count
