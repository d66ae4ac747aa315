"""
FastAPI dependencies for database sessions, the record store, the viewer
identity and rendering.
"""

import uuid
from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from listshare.config import get_settings
from listshare.database import get_db
from listshare.engines.dashboard import is_partial_request
from listshare.kernel.store import RecordStore
from listshare.web.renderer import Renderer


DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_store(db: DbSession) -> RecordStore:
    """One store gateway per request; nothing is shared between requests."""
    return RecordStore(db)


Store = Annotated[RecordStore, Depends(get_store)]


def get_viewer_id() -> uuid.UUID:
    """
    Identity of the user the pages are built for.

    There is no login yet, so this is the configured viewer. Swap this
    dependency out once sessions exist.
    """
    return get_settings().viewer_id


ViewerId = Annotated[uuid.UUID, Depends(get_viewer_id)]


def get_partial_request(
    hx_request: Annotated[Optional[str], Header(alias="HX-Request")] = None,
) -> bool:
    """True when htmx made the request and only wants the fragment."""
    return is_partial_request(hx_request)


PartialRequest = Annotated[bool, Depends(get_partial_request)]


@lru_cache
def get_renderer() -> Renderer:
    """Get cached renderer instance."""
    return Renderer(get_settings().templates_dir)


PageRenderer = Annotated[Renderer, Depends(get_renderer)]
