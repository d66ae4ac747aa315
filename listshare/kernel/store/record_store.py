"""
Record store gateway.

Typed read access to the four collections. Every public method is exactly one
store round trip, counted in `round_trips`, so callers can check they are not
issuing one query per record.
"""

import uuid
from typing import Iterable, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from listshare.kernel.errors import StoreFailure
from listshare.kernel.models import Friendship, ItemList, ListItem, User
from listshare.logging_config import count_store_round_trip, get_logger

logger = get_logger(__name__)


class RecordStore:
    """
    Read-only gateway over an async database session.

    Results come back in ascending id order. Ids are time-ordered, so this
    is creation order.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.round_trips = 0

    async def _all(self, operation: str, query: Select) -> List:
        self.round_trips += 1
        count_store_round_trip()
        try:
            result = await self.session.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as exc:
            logger.error(
                "Store read failed",
                extra={"operation": operation, "error": str(exc)},
            )
            raise StoreFailure(operation, exc) from exc

    async def _one_or_none(self, operation: str, query: Select):
        rows = await self._all(operation, query)
        return rows[0] if rows else None

    # Users

    async def get_user(self, user_id: uuid.UUID) -> Optional[User]:
        """Find a user by id."""
        return await self._one_or_none(
            "get_user",
            select(User).where(User.id == user_id),
        )

    async def get_users(self, user_ids: Iterable[uuid.UUID]) -> List[User]:
        """Find every user whose id is in the given set, in one query."""
        ids = list(user_ids)
        return await self._all(
            "get_users",
            select(User).where(User.id.in_(ids)).order_by(User.id),
        )

    # Friendships

    async def get_friendships(self, user_id: uuid.UUID) -> List[Friendship]:
        """Outgoing friendships of a user (user_id -> friend_id)."""
        return await self._all(
            "get_friendships",
            select(Friendship)
            .where(Friendship.user_id == user_id)
            .order_by(Friendship.id),
        )

    # Lists

    async def get_list(self, list_id: uuid.UUID) -> Optional[ItemList]:
        """Find a list by id."""
        return await self._one_or_none(
            "get_list",
            select(ItemList).where(ItemList.id == list_id),
        )

    async def get_lists_for_owner(self, user_id: uuid.UUID) -> List[ItemList]:
        """Every list owned by one user."""
        return await self._all(
            "get_lists_for_owner",
            select(ItemList)
            .where(ItemList.user_id == user_id)
            .order_by(ItemList.id),
        )

    async def get_lists_for_owners(
        self,
        user_ids: Sequence[uuid.UUID],
    ) -> List[ItemList]:
        """Every list owned by any of the given users, in one query."""
        ids = list(user_ids)
        return await self._all(
            "get_lists_for_owners",
            select(ItemList)
            .where(ItemList.user_id.in_(ids))
            .order_by(ItemList.id),
        )

    # List items

    async def get_items_for_list(self, list_id: uuid.UUID) -> List[ListItem]:
        """All items on a list, removed ones included."""
        return await self._all(
            "get_items_for_list",
            select(ListItem)
            .where(ListItem.list_id == list_id)
            .order_by(ListItem.id),
        )
