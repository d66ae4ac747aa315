"""
Exceptions raised by the record store and the aggregation engines.

Route handlers never catch these; the handlers registered in
`listshare.main` map them to HTML error responses.
"""

import uuid
from typing import Optional


class ListShareError(Exception):
    """Base exception for ListShare."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreFailure(ListShareError):
    """A read from the record store failed. Fatal for the request, never retried."""

    status_code = 500

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        super().__init__(f"Store read failed during {operation}")
        self.operation = operation
        self.cause = cause


class NotFoundError(ListShareError):
    """A requested record could not be resolved."""

    status_code = 404


class ListNotFoundError(NotFoundError):
    """The list, or the user owning it, does not exist."""

    def __init__(self, list_id: uuid.UUID, reason: str = "list does not exist"):
        super().__init__(f"List not found: {list_id} ({reason})")
        self.list_id = list_id
        self.reason = reason
