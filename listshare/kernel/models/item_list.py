"""
List and list item models.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import List, Optional

from sqlalchemy import DateTime, ForeignKey, JSON, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from listshare.kernel.models.base import Base, TimestampMixin, generate_uuid


class PrivacyLevel(str, Enum):
    """Who may see a list."""
    PUBLIC = "public"
    PRIVATE = "private"


class ItemList(Base, TimestampMixin):
    """A named list of items, usually owned by one user."""

    __tablename__ = "lists"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        primary_key=True,
        default=generate_uuid,
    )
    # Orphaned lists have no owner
    user_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    color: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
    )
    privacy_level: Mapped[PrivacyLevel] = mapped_column(
        String(20),
        default=PrivacyLevel.PUBLIC,
        nullable=False,
    )
    # Explicit item order as a list of item id strings; not applied on read
    list_item_order: Mapped[Optional[List[str]]] = mapped_column(
        JSON,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<ItemList {self.id} {self.name!r}>"


class ListItem(Base, TimestampMixin):
    """An entry on a list, optionally claimed by someone."""

    __tablename__ = "list_items"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        primary_key=True,
        default=generate_uuid,
    )
    list_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(),
        ForeignKey("lists.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    name: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
    )
    link: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    # Claimer is either a known user, free text, or both
    claimer_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid(),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    claimer_string: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    removed_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    @property
    def is_removed(self) -> bool:
        return self.removed_at is not None

    @property
    def is_claimed(self) -> bool:
        return self.claimer_id is not None or bool(self.claimer_string)

    def __repr__(self) -> str:
        return f"<ListItem {self.id} {self.name!r}>"
