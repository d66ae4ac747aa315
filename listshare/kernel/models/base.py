"""
Base model with common fields and utilities.
"""

import os
import threading
import time
import uuid
from datetime import datetime

from sqlalchemy import DateTime, func, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    # Use generic Uuid type for cross-database compatibility
    type_annotation_map = {
        uuid.UUID: Uuid(),
    }


class TimestampMixin:
    """Mixin for created_at and updated_at timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


_uuid_lock = threading.Lock()
_last_ms = 0
_counter = 0


def generate_uuid() -> uuid.UUID:
    """
    Generate a time-ordered UUID (version 7 layout).

    The first 48 bits are the Unix time in milliseconds. The next 12 bits
    are a counter, reseeded at random each new millisecond and incremented
    within one, so ids made by this process sort in the order they were
    generated. The last 62 bits are random.
    """
    global _last_ms, _counter

    with _uuid_lock:
        now_ms = time.time_ns() // 1_000_000
        if now_ms > _last_ms:
            _last_ms = now_ms
            # Top bit left clear so a millisecond has room for 2048+ ids
            _counter = int.from_bytes(os.urandom(2), "big") & 0x7FF
        else:
            # Same millisecond, or the clock stepped back
            _counter += 1
            if _counter > 0xFFF:
                _last_ms += 1
                _counter = 0
        timestamp_ms, counter = _last_ms, _counter

    tail = int.from_bytes(os.urandom(8), "big") & 0x3FFF_FFFF_FFFF_FFFF
    value = (timestamp_ms & 0xFFFF_FFFF_FFFF) << 80
    value |= 0x7 << 76  # version
    value |= counter << 64
    value |= 0b10 << 62  # RFC 4122 variant
    value |= tail
    return uuid.UUID(int=value)
