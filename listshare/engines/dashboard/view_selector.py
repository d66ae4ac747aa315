"""
View Selector - picks the fragment or composite shape for a list page.

An htmx navigation (`HX-Request: true`) already has the page shell, so it
only needs the list detail. Anything else is a fresh page load and gets the
whole dashboard with the list embedded.
"""

import uuid
from typing import Optional

from listshare.engines.dashboard.dashboard_service import DashboardService
from listshare.engines.dashboard.list_resolver import ListResolver
from listshare.kernel.store import RecordStore
from listshare.logging_config import get_logger
from listshare.schemas.views import (
    ListPageView,
    build_composite_view,
    build_fragment_view,
)

logger = get_logger(__name__)

PARTIAL_REQUEST_HEADER = "HX-Request"
PARTIAL_REQUEST_VALUE = "true"


def is_partial_request(header_value: Optional[str]) -> bool:
    """Only the exact string "true" selects the fragment shape."""
    return header_value == PARTIAL_REQUEST_VALUE


class ViewSelector:
    """Builds the list page view model for one request."""

    def __init__(self, store: RecordStore):
        self.resolver = ListResolver(store)
        self.dashboards = DashboardService(store)

    async def select_view(
        self,
        list_id: uuid.UUID,
        viewer_id: uuid.UUID,
        partial: bool,
    ) -> ListPageView:
        # NotFound surfaces here, before any dashboard query
        resolved = await self.resolver.resolve_list(list_id)

        if partial:
            logger.debug("Selected fragment view", extra={"list_id": str(list_id)})
            return build_fragment_view(resolved)

        dashboard = await self.dashboards.assemble_dashboard(viewer_id)
        logger.debug("Selected composite view", extra={"list_id": str(list_id)})
        return build_composite_view(resolved, dashboard)
