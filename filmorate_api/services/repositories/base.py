"""Storage contracts shared by the in-memory and Mongo backends."""

from __future__ import annotations

from typing import Dict, List, Optional, Protocol, Set, TypeVar

T = TypeVar('T')


class Repository(Protocol[T]):
    """CRUD over entities keyed by a generated integer id.

    Absence is reported with sentinels (``None``/``False``); turning them
    into errors is the service layer's job.
    """

    async def get(self, entity_id: int) -> Optional[T]:
        ...

    async def get_all(self) -> List[T]:
        """Return all entities ordered by id."""
        ...

    async def contains(self, entity_id: int) -> bool:
        ...

    async def create(self, entity: T) -> Optional[T]:
        """Assign the next id and store; ``None`` if entity.id is taken."""
        ...

    async def update(self, entity: T) -> Optional[T]:
        """Replace by id; ``None`` if there is nothing to replace."""
        ...

    async def delete(self, entity_id: int) -> bool:
        ...

    async def delete_all(self) -> int:
        """Remove everything, reset the id sequence, return the count."""
        ...


class ReferenceRepository(Protocol[T]):
    """Read-only lookup table (genres, MPA ratings)."""

    async def get(self, entity_id: int) -> Optional[T]:
        ...

    async def get_all(self) -> List[T]:
        ...


class FriendsStore(Protocol):
    """Directed user -> friend edges."""

    async def add(self, user_id: int, friend_id: int) -> bool:
        """Create the edge; ``False`` if it already existed."""
        ...

    async def remove(self, user_id: int, friend_id: int) -> bool:
        ...

    async def friend_ids(self, user_id: int) -> Set[int]:
        """Targets of the user's outgoing edges."""
        ...

    async def follower_ids(self, user_id: int) -> Set[int]:
        """Sources of edges pointing at the user."""
        ...

    async def adjacency(self) -> Dict[int, Set[int]]:
        ...

    async def delete_outgoing(self, user_id: int) -> None:
        ...

    async def delete_incoming(self, user_id: int) -> None:
        ...

    async def delete_all(self) -> None:
        ...


class LikesStore(Protocol):
    """(film, user) like pairs with set semantics."""

    async def add(self, film_id: int, user_id: int) -> bool:
        ...

    async def remove(self, film_id: int, user_id: int) -> bool:
        ...

    async def user_ids(self, film_id: int) -> Set[int]:
        ...

    async def by_film(self) -> Dict[int, Set[int]]:
        ...

    async def delete_by_film(self, film_id: int) -> None:
        ...

    async def delete_by_user(self, user_id: int) -> None:
        ...

    async def delete_all(self) -> None:
        ...
