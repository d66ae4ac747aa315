"""
Record store gateway.
"""

from listshare.kernel.store.record_store import RecordStore

__all__ = ["RecordStore"]
