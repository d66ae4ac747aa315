"""
View models consumed by the HTML renderer.

The list page comes in exactly two shapes, tagged by `kind`:
a fragment (list detail only) and a composite (list detail plus the
viewer's dashboard). `ListPageView` is their discriminated union.
"""

import uuid
from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from listshare.kernel.models.item_list import PrivacyLevel
from listshare.kernel.models.user import Theme

SAFE_LINK_SCHEMES = ("http://", "https://")


class UserSummary(BaseModel):
    """User fields shown on list pages."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    first_name: str
    last_name: str
    full_name: str
    theme: Theme = Theme.LIGHT
    avatar_key: Optional[str] = None


class ListSummary(BaseModel):
    """List fields shown in dashboard columns and list headers."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: Optional[uuid.UUID] = None
    name: str
    color: str
    privacy_level: PrivacyLevel = PrivacyLevel.PUBLIC
    list_item_order: Optional[List[str]] = None


class ListItemView(BaseModel):
    """One item row on the list detail."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    link: Optional[str] = None
    claimer_id: Optional[uuid.UUID] = None
    claimer_string: Optional[str] = None
    removed_at: Optional[datetime] = None
    is_removed: bool = False
    is_claimed: bool = False

    @computed_field
    @property
    def href(self) -> Optional[str]:
        """The link, if it is safe to put in an anchor (http or https only)."""
        if self.link and self.link.strip().lower().startswith(SAFE_LINK_SCHEMES):
            return self.link.strip()
        return None


class FriendListsView(BaseModel):
    """A friend paired with the lists they own (possibly none)."""

    friend: UserSummary
    lists: List[ListSummary] = []


class DashboardView(BaseModel):
    """The viewer's own lists and their friends' lists."""

    owned_lists: List[ListSummary] = []
    friend_lists: List[FriendListsView] = []


class FragmentView(BaseModel):
    """List detail for in-page replacement."""

    kind: Literal["fragment"] = "fragment"
    list: ListSummary
    owner: UserSummary
    items: List[ListItemView] = []


class CompositeView(BaseModel):
    """List detail embedded in the full dashboard page."""

    kind: Literal["composite"] = "composite"
    dashboard: DashboardView
    list: ListSummary
    owner: UserSummary
    items: List[ListItemView] = []


ListPageView = Annotated[
    Union[FragmentView, CompositeView],
    Field(discriminator="kind"),
]


def build_dashboard_view(dashboard) -> DashboardView:
    """Convert an assembled `Dashboard` of ORM records into its view model."""
    return DashboardView(
        owned_lists=[ListSummary.model_validate(lst) for lst in dashboard.owned_lists],
        friend_lists=[
            FriendListsView(
                friend=UserSummary.model_validate(friend),
                lists=[ListSummary.model_validate(lst) for lst in lists],
            )
            for friend, lists in dashboard.friend_lists
        ],
    )


def build_fragment_view(resolved) -> FragmentView:
    """Convert a `ResolvedList` into the fragment page shape."""
    return FragmentView(
        list=ListSummary.model_validate(resolved.list),
        owner=UserSummary.model_validate(resolved.owner),
        items=[ListItemView.model_validate(item) for item in resolved.items],
    )


def build_composite_view(resolved, dashboard) -> CompositeView:
    """Merge a `ResolvedList` and a `Dashboard` into the composite page shape."""
    return CompositeView(
        dashboard=build_dashboard_view(dashboard),
        list=ListSummary.model_validate(resolved.list),
        owner=UserSummary.model_validate(resolved.owner),
        items=[ListItemView.model_validate(item) for item in resolved.items],
    )
