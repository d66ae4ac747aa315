"""
ASGI middleware.
"""

from listshare.api.middleware.request_context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
