"""
Dashboard Engine

Read-side aggregation for list pages:
- DashboardService: viewer's lists plus friends' lists in batched queries
- ListResolver: one list with its owner and items
- ViewSelector: fragment vs composite list page
"""

from listshare.engines.dashboard.dashboard_service import (
    Dashboard,
    DashboardService,
    group_lists_by_owner,
    unique_ids,
)
from listshare.engines.dashboard.list_resolver import ListResolver, ResolvedList
from listshare.engines.dashboard.view_selector import (
    ViewSelector,
    is_partial_request,
    PARTIAL_REQUEST_HEADER,
)

__all__ = [
    "Dashboard",
    "DashboardService",
    "group_lists_by_owner",
    "unique_ids",
    "ListResolver",
    "ResolvedList",
    "ViewSelector",
    "is_partial_request",
    "PARTIAL_REQUEST_HEADER",
]
