"""
Pydantic view models for rendering.
"""

from listshare.schemas.common import HealthResponse
from listshare.schemas.views import (
    UserSummary,
    ListSummary,
    ListItemView,
    FriendListsView,
    DashboardView,
    FragmentView,
    CompositeView,
    ListPageView,
    build_dashboard_view,
    build_fragment_view,
    build_composite_view,
)

__all__ = [
    "HealthResponse",
    "UserSummary",
    "ListSummary",
    "ListItemView",
    "FriendListsView",
    "DashboardView",
    "FragmentView",
    "CompositeView",
    "ListPageView",
    "build_dashboard_view",
    "build_fragment_view",
    "build_composite_view",
]
