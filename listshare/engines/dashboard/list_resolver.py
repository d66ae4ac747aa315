"""
List Resolver - one list with its owner and items.
"""

import uuid
from dataclasses import dataclass, field
from typing import List

from listshare.kernel.errors import ListNotFoundError
from listshare.kernel.models import ItemList, ListItem, User
from listshare.kernel.store import RecordStore
from listshare.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class ResolvedList:
    list: ItemList
    owner: User
    items: List[ListItem] = field(default_factory=list)


class ListResolver:
    """Resolves a single list for the detail view."""

    def __init__(self, store: RecordStore):
        self.store = store

    async def resolve_list(self, list_id: uuid.UUID) -> ResolvedList:
        """
        Fetch a list, the user who owns it, and all of its items.

        Items come back in store order. Removed items are included and
        `list_item_order` is not applied; both are left to the renderer.

        Raises:
            ListNotFoundError: If the list does not exist, has no owner, or
                its owner does not exist
        """
        item_list = await self.store.get_list(list_id)
        if item_list is None:
            raise ListNotFoundError(list_id)

        if item_list.user_id is None:
            raise ListNotFoundError(list_id, reason="list has no owner")

        owner = await self.store.get_user(item_list.user_id)
        if owner is None:
            raise ListNotFoundError(list_id, reason="owner does not exist")

        items = await self.store.get_items_for_list(item_list.id)

        logger.debug(
            "Resolved list",
            extra={"list_id": str(list_id), "items": len(items)},
        )
        return ResolvedList(list=item_list, owner=owner, items=items)
