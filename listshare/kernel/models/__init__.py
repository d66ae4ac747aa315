"""
Kernel Data Models

SQLAlchemy models for the four record collections: users, friendships,
lists and list items.
"""

from listshare.kernel.models.base import Base, TimestampMixin, generate_uuid
from listshare.kernel.models.user import User, AccessLevel, Theme
from listshare.kernel.models.friendship import Friendship
from listshare.kernel.models.item_list import ItemList, ListItem, PrivacyLevel

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "generate_uuid",
    # User
    "User",
    "AccessLevel",
    "Theme",
    # Social graph
    "Friendship",
    # Lists
    "ItemList",
    "ListItem",
    "PrivacyLevel",
]
