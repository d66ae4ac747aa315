"""
Dashboard Service - the viewer's lists plus each friend's lists.

Everything is fetched in four store round trips regardless of how many
friends the viewer has:

1. lists owned by the viewer
2. the viewer's outgoing friendships
3. all friends' lists (one batched query)
4. all friend users (one batched query)
"""

import uuid
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from listshare.kernel.models import ItemList, User
from listshare.kernel.store import RecordStore
from listshare.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class Dashboard:
    """Owned lists and (friend, friend's lists) pairs for one viewer."""

    owned_lists: List[ItemList] = field(default_factory=list)
    friend_lists: List[Tuple[User, List[ItemList]]] = field(default_factory=list)


def group_lists_by_owner(lists: Iterable[ItemList]) -> Dict[uuid.UUID, List[ItemList]]:
    """
    Build a multi-map from owner id to that owner's lists in one pass.

    Lists keep the order they arrive in. Unowned lists are skipped.
    """
    grouped: Dict[uuid.UUID, List[ItemList]] = {}
    for lst in lists:
        if lst.user_id is None:
            continue
        grouped.setdefault(lst.user_id, []).append(lst)
    return grouped


def unique_ids(ids: Iterable[uuid.UUID]) -> List[uuid.UUID]:
    """Drop repeated ids, keeping the first occurrence."""
    return list(dict.fromkeys(ids))


class DashboardService:
    """Assembles the dashboard view data for a viewer."""

    def __init__(self, store: RecordStore):
        self.store = store

    async def assemble_dashboard(self, viewer_id: uuid.UUID) -> Dashboard:
        """
        Fetch the viewer's lists and every friend's lists.

        Every friend that resolves to a user appears exactly once, paired with
        an empty list when they own nothing. Friend ids with no user record
        are dropped. Any store failure propagates; there is no partial result.
        """
        owned_lists = await self.store.get_lists_for_owner(viewer_id)

        friendships = await self.store.get_friendships(viewer_id)
        friend_ids = unique_ids(f.friend_id for f in friendships)

        friends_to_lists = group_lists_by_owner(
            await self.store.get_lists_for_owners(friend_ids)
        )
        friends = await self.store.get_users(friend_ids)

        friend_lists = [
            (friend, friends_to_lists.pop(friend.id, []))
            for friend in friends
        ]

        logger.debug(
            "Dashboard assembled",
            extra={
                "viewer_id": str(viewer_id),
                "owned_lists": len(owned_lists),
                "friends": len(friend_lists),
            },
        )
        return Dashboard(owned_lists=owned_lists, friend_lists=friend_lists)
