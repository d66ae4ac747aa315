"""
List page endpoints. Both return HTML.
"""

import uuid

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from listshare.api.deps import PageRenderer, PartialRequest, Store, ViewerId
from listshare.engines.dashboard import (
    DashboardService,
    PARTIAL_REQUEST_HEADER,
    ViewSelector,
)
from listshare.schemas.views import build_dashboard_view

router = APIRouter()


@router.get("", response_class=HTMLResponse)
async def lists_page(
    store: Store,
    viewer_id: ViewerId,
    renderer: PageRenderer,
):
    """The viewer's lists alongside every friend's lists."""
    dashboard = await DashboardService(store).assemble_dashboard(viewer_id)
    return renderer.render_dashboard(build_dashboard_view(dashboard))


@router.get("/{list_id}", response_class=HTMLResponse)
async def list_page(
    list_id: uuid.UUID,
    store: Store,
    viewer_id: ViewerId,
    partial: PartialRequest,
    renderer: PageRenderer,
):
    """One list: a fragment for htmx swaps, the full dashboard otherwise."""
    view = await ViewSelector(store).select_view(list_id, viewer_id, partial)
    response = renderer.render_page(view)
    # Same URL serves two shapes, so caches must key on the header
    response.headers["Vary"] = PARTIAL_REQUEST_HEADER
    return response
