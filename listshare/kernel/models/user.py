"""
User model.
"""

import uuid
from enum import Enum
from typing import List, Optional

from sqlalchemy import JSON, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from listshare.kernel.models.base import Base, TimestampMixin, generate_uuid


class AccessLevel(str, Enum):
    """What a user is allowed to do."""
    USER = "user"
    ADMIN = "admin"


class Theme(str, Enum):
    """Display theme preference."""
    LIGHT = "light"
    DARK = "dark"


class User(Base, TimestampMixin):
    """User account model."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        primary_key=True,
        default=generate_uuid,
    )
    first_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    last_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    access_level: Mapped[AccessLevel] = mapped_column(
        String(20),
        default=AccessLevel.USER,
        nullable=False,
    )
    # Stored as-is; nothing in the read path inspects it
    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    favorite_users: Mapped[List[str]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )
    theme: Mapped[Theme] = mapped_column(
        String(20),
        default=Theme.LIGHT,
        nullable=False,
    )
    avatar_key: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __repr__(self) -> str:
        return f"<User {self.id} {self.full_name}>"
