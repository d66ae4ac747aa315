"""
Friendship model - a directed edge between two users.
"""

import uuid

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from listshare.kernel.models.base import Base, TimestampMixin, generate_uuid


class Friendship(Base, TimestampMixin):
    """
    One-way friendship: `user_id` considers `friend_id` a friend.

    A mutual friendship is two rows, one in each direction.
    """

    __tablename__ = "friendships"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        primary_key=True,
        default=generate_uuid,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    friend_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Friendship {self.user_id} -> {self.friend_id}>"
