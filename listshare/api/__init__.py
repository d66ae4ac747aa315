"""
HTTP routes.
"""

from fastapi import APIRouter

from listshare.api import lists

router = APIRouter()

router.include_router(lists.router, prefix="/lists", tags=["Lists"])
