"""Service layer for users and the directed friendship relation."""

from __future__ import annotations

from typing import Dict, List, Set

from filmorate_api.models.users import FriendItem, User
from filmorate_api.services.context import ServiceContext
from filmorate_api.services.errors import (
    ObjectAlreadyExists,
    ObjectNotFound,
)
from filmorate_api.services.helpers import reject, require, storage_errors


class UsersService:
    """CRUD for users and the friend edges between them.

    A friend edge is directed (user -> friend). A friendship is
    acknowledged when the reverse edge exists as well.
    """

    def __init__(self, ctx: ServiceContext) -> None:
        self.users = ctx.storages.users
        self.friends = ctx.storages.friends
        self.likes = ctx.storages.likes
        self.log = ctx.log.getChild('users')

    # ---------- READ ----------

    @storage_errors('user_get')
    async def get(self, user_id: int) -> User:
        user = require(await self.users.get(user_id), 'user', user_id)
        return user.model_copy(
            update={'friends': await self._friend_map(user_id)})

    @storage_errors('user_get_all')
    async def get_all(self) -> List[User]:
        edges = await self.friends.adjacency()
        return [
            user.model_copy(update={'friends': {
                fid: user.id in edges.get(fid, ())
                for fid in sorted(edges.get(user.id, ()))
            }})
            for user in await self.users.get_all()
        ]

    # ---------- WRITE ----------

    @storage_errors('user_create')
    async def create(self, user: User) -> User:
        """Validate and store a new user with the friend map it carries."""
        user = self._validate(user)
        await self._require_all(user.friends)
        created = await self.users.create(self._bare(user))
        if created is None:
            self.log.error('user_already_exists', extra={'user_id': user.id})
            raise ObjectAlreadyExists.of('user', user.id)
        await self._store_friend_map(created.id, user.friends)
        self.log.info('user_created', extra={'user_id': created.id})
        return await self.get(created.id)

    @storage_errors('user_update')
    async def update(self, user: User) -> User:
        """Replace a user; its edges in both directions are rebuilt."""
        user = self._validate(user)
        await self._require_all(user.friends)
        updated = await self.users.update(self._bare(user))
        if updated is None:
            self.log.error('user_not_found', extra={'user_id': user.id})
            raise ObjectNotFound.of('user', user.id)
        await self.friends.delete_outgoing(user.id)
        await self.friends.delete_incoming(user.id)
        await self._store_friend_map(user.id, user.friends)
        self.log.info('user_updated', extra={'user_id': user.id})
        return await self.get(user.id)

    @storage_errors('user_delete')
    async def delete(self, user_id: int) -> bool:
        deleted = await self.users.delete(user_id)
        if deleted:
            await self.friends.delete_outgoing(user_id)
            await self.friends.delete_incoming(user_id)
            await self.likes.delete_by_user(user_id)
            self.log.info('user_deleted', extra={'user_id': user_id})
        else:
            self.log.warning('user_already_absent', extra={'user_id': user_id})
        return deleted

    @storage_errors('user_delete_all')
    async def delete_all(self) -> int:
        count = await self.users.delete_all()
        await self.friends.delete_all()
        await self.likes.delete_all()
        self.log.info('users_deleted', extra={'count': count})
        return count

    # ---------- FRIENDS ----------

    @storage_errors('user_add_friend')
    async def add_friend(self, user_id: int, friend_id: int) -> bool:
        """Create the edge user -> friend; True if it is new."""
        await self._require_user(user_id)
        await self._require_user(friend_id)
        if user_id == friend_id:
            reject(self.log, 'user cannot befriend itself', user_id=user_id)
        created = await self.friends.add(user_id, friend_id)
        if created:
            self.log.info('friend_added',
                          extra={'user_id': user_id, 'friend_id': friend_id})
        else:
            self.log.warning('friend_already_exists',
                             extra={'user_id': user_id, 'friend_id': friend_id})
        return created

    @storage_errors('user_delete_friend')
    async def delete_friend(self, user_id: int, friend_id: int) -> bool:
        """Remove the edge user -> friend; False if there was none."""
        deleted = await self.friends.remove(user_id, friend_id)
        if deleted:
            self.log.info('friend_deleted',
                          extra={'user_id': user_id, 'friend_id': friend_id})
        else:
            self.log.warning('friend_absent',
                             extra={'user_id': user_id, 'friend_id': friend_id})
        return deleted

    @storage_errors('user_get_friends')
    async def get_friends(self, user_id: int) -> List[FriendItem]:
        """Everyone the user points to, flagged when the edge is mutual."""
        await self._require_user(user_id)
        targets = await self.friends.friend_ids(user_id)
        followers = await self.friends.follower_ids(user_id)
        return await self._friend_items(targets, followers)

    @storage_errors('user_get_acknowledged_friends')
    async def get_acknowledged_friends(self, user_id: int) -> List[FriendItem]:
        await self._require_user(user_id)
        targets = await self.friends.friend_ids(user_id)
        followers = await self.friends.follower_ids(user_id)
        return await self._friend_items(targets & followers, followers)

    @storage_errors('user_get_common_friends')
    async def get_common_friends(
        self,
        user_id: int,
        other_id: int,
    ) -> List[FriendItem]:
        """Intersection of both users' targets, minus the two users."""
        await self._require_user(user_id)
        await self._require_user(other_id)
        common = (await self.friends.friend_ids(user_id)
                  & await self.friends.friend_ids(other_id))
        common -= {user_id, other_id}
        followers = await self.friends.follower_ids(user_id)
        return await self._friend_items(common, followers)

    # ---------- helpers ----------

    def _validate(self, user: User) -> User:
        if not user.login.strip():
            reject(self.log, 'login must not be blank')
        if any(ch.isspace() for ch in user.login):
            reject(self.log, f'login must not contain spaces: {user.login!r}')
        if user.name is None or not user.name.strip():
            self.log.info('name_replaced_by_login',
                          extra={'login': user.login})
            user = user.model_copy(update={'name': user.login})
        return user

    async def _require_user(self, user_id: int) -> None:
        if not await self.users.contains(user_id):
            self.log.error('user_not_found', extra={'user_id': user_id})
            raise ObjectNotFound.of('user', user_id)

    async def _require_all(self, friends: Dict[int, bool]) -> None:
        for friend_id in friends:
            await self._require_user(friend_id)

    async def _store_friend_map(
            self,
            user_id: int,
            friends: Dict[int, bool]) -> None:
        """Write user -> friend edges; acknowledged ones also get the reverse."""
        for friend_id, acknowledged in friends.items():
            if friend_id == user_id:
                continue
            await self.friends.add(user_id, friend_id)
            if acknowledged:
                await self.friends.add(friend_id, user_id)

    async def _friend_map(self, user_id: int) -> Dict[int, bool]:
        targets = await self.friends.friend_ids(user_id)
        followers = await self.friends.follower_ids(user_id)
        return {fid: fid in followers for fid in sorted(targets)}

    async def _friend_items(
            self,
            friend_ids: Set[int],
            followers: Set[int]) -> List[FriendItem]:
        """Load users by id (ascending) and flag the ones in ``followers``."""
        items = []
        for fid in sorted(friend_ids):
            friend = await self.users.get(fid)
            if friend is None:
                continue
            items.append(FriendItem(
                **friend.model_dump(exclude={'friends'}),
                friends=await self._friend_map(fid),
                acknowledged=fid in followers,
            ))
        return items

    @staticmethod
    def _bare(user: User) -> User:
        return user.model_copy(update={'friends': {}})
