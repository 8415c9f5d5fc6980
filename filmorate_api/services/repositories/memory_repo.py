"""In-memory storage backend.

Every store owns an ``asyncio.Lock`` taken around mutations, so concurrent
requests served by one event loop never interleave a read-modify-write.
Entities are copied on the way in and out; callers never alias stored state.
"""

from __future__ import annotations

import asyncio
from collections import defaultdict
from typing import Dict, Generic, Iterable, List, Optional, Set, TypeVar

from pydantic import BaseModel

M = TypeVar('M', bound=BaseModel)


class MemoryRepo(Generic[M]):
    """Dict ``id -> entity`` with a counter that is never reused.

    Only ``delete_all`` resets the counter.
    """

    def __init__(self) -> None:
        self._items: Dict[int, M] = {}
        self._last_id = 0
        self._lock = asyncio.Lock()

    async def get(self, entity_id: int) -> Optional[M]:
        item = self._items.get(entity_id)
        return None if item is None else item.model_copy(deep=True)

    async def get_all(self) -> List[M]:
        return [self._items[key].model_copy(deep=True)
                for key in sorted(self._items)]

    async def contains(self, entity_id: int) -> bool:
        return entity_id in self._items

    async def create(self, entity: M) -> Optional[M]:
        async with self._lock:
            if entity.id in self._items:
                return None
            self._last_id += 1
            stored = entity.model_copy(
                update={'id': self._last_id}, deep=True)
            self._items[stored.id] = stored
            return stored.model_copy(deep=True)

    async def update(self, entity: M) -> Optional[M]:
        async with self._lock:
            if entity.id not in self._items:
                return None
            self._items[entity.id] = entity.model_copy(deep=True)
            return entity.model_copy(deep=True)

    async def delete(self, entity_id: int) -> bool:
        async with self._lock:
            return self._items.pop(entity_id, None) is not None

    async def delete_all(self) -> int:
        async with self._lock:
            count = len(self._items)
            self._items.clear()
            self._last_id = 0
            return count


class MemoryReferenceRepo(Generic[M]):
    def __init__(self, seed: Iterable[M]) -> None:
        self._items: Dict[int, M] = {item.id: item for item in seed}

    async def get(self, entity_id: int) -> Optional[M]:
        item = self._items.get(entity_id)
        return None if item is None else item.model_copy()

    async def get_all(self) -> List[M]:
        return [self._items[key].model_copy() for key in sorted(self._items)]


class MemoryFriendsRepo:
    def __init__(self) -> None:
        self._edges: Dict[int, Set[int]] = defaultdict(set)
        self._lock = asyncio.Lock()

    async def add(self, user_id: int, friend_id: int) -> bool:
        async with self._lock:
            targets = self._edges[user_id]
            if friend_id in targets:
                return False
            targets.add(friend_id)
            return True

    async def remove(self, user_id: int, friend_id: int) -> bool:
        async with self._lock:
            targets = self._edges.get(user_id)
            if not targets or friend_id not in targets:
                return False
            targets.discard(friend_id)
            return True

    async def friend_ids(self, user_id: int) -> Set[int]:
        return set(self._edges.get(user_id, ()))

    async def follower_ids(self, user_id: int) -> Set[int]:
        return {source for source, targets in self._edges.items()
                if user_id in targets}

    async def adjacency(self) -> Dict[int, Set[int]]:
        return {source: set(targets)
                for source, targets in self._edges.items() if targets}

    async def delete_outgoing(self, user_id: int) -> None:
        async with self._lock:
            self._edges.pop(user_id, None)

    async def delete_incoming(self, user_id: int) -> None:
        async with self._lock:
            for targets in self._edges.values():
                targets.discard(user_id)

    async def delete_all(self) -> None:
        async with self._lock:
            self._edges.clear()


class MemoryLikesRepo:
    def __init__(self) -> None:
        self._likes: Dict[int, Set[int]] = defaultdict(set)
        self._lock = asyncio.Lock()

    async def add(self, film_id: int, user_id: int) -> bool:
        async with self._lock:
            users = self._likes[film_id]
            if user_id in users:
                return False
            users.add(user_id)
            return True

    async def remove(self, film_id: int, user_id: int) -> bool:
        async with self._lock:
            users = self._likes.get(film_id)
            if not users or user_id not in users:
                return False
            users.discard(user_id)
            return True

    async def user_ids(self, film_id: int) -> Set[int]:
        return set(self._likes.get(film_id, ()))

    async def by_film(self) -> Dict[int, Set[int]]:
        return {film_id: set(users)
                for film_id, users in self._likes.items() if users}

    async def delete_by_film(self, film_id: int) -> None:
        async with self._lock:
            self._likes.pop(film_id, None)

    async def delete_by_user(self, user_id: int) -> None:
        async with self._lock:
            for users in self._likes.values():
                users.discard(user_id)

    async def delete_all(self) -> None:
        async with self._lock:
            self._likes.clear()
