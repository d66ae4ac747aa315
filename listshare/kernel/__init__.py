"""
Kernel layer: data models, the record store gateway and the error taxonomy.
"""

from listshare.kernel.errors import (
    ListShareError,
    StoreFailure,
    NotFoundError,
    ListNotFoundError,
)
from listshare.kernel.store import RecordStore

__all__ = [
    "ListShareError",
    "StoreFailure",
    "NotFoundError",
    "ListNotFoundError",
    "RecordStore",
]
