"""Unit tests for fragment vs composite view selection."""

import uuid
from unittest.mock import AsyncMock, patch

import pytest

from listshare.engines.dashboard import DashboardService, ViewSelector, is_partial_request
from listshare.kernel.errors import ListNotFoundError, StoreFailure
from listshare.kernel.store import RecordStore
from listshare.schemas.views import CompositeView, FragmentView


class TestIsPartialRequest:

    @pytest.mark.parametrize("value", ["true"])
    def test_affirmative(self, value):
        assert is_partial_request(value) is True

    @pytest.mark.parametrize("value", [None, "", "True", "TRUE", "1", "yes", "false", " true"])
    def test_anything_else_is_a_full_load(self, value):
        assert is_partial_request(value) is False


class TestSelectView:

    @pytest.mark.asyncio
    async def test_fragment_has_no_dashboard(self, db_session, social_graph):
        store = RecordStore(db_session)
        with patch.object(DashboardService, "assemble_dashboard", new_callable=AsyncMock) as assemble:
            view = await ViewSelector(store).select_view(
                social_graph.list_a.id, social_graph.viewer.id, partial=True
            )

        assemble.assert_not_awaited()
        assert isinstance(view, FragmentView)
        assert view.kind == "fragment"
        assert not hasattr(view, "dashboard")
        assert view.list.name == "List A"
        assert view.owner.full_name == "Vera Viewer"
        assert [item.name for item in view.items] == ["Kettle", "Scarf", "Old idea"]

    @pytest.mark.asyncio
    async def test_composite_carries_dashboard_and_list(self, db_session, social_graph):
        store = RecordStore(db_session)
        view = await ViewSelector(store).select_view(
            social_graph.list_c.id, social_graph.viewer.id, partial=False
        )

        assert isinstance(view, CompositeView)
        assert view.kind == "composite"
        assert view.list.name == "List C"
        assert view.owner.id == social_graph.friend_one.id
        assert [lst.name for lst in view.dashboard.owned_lists] == ["List A", "List B"]
        assert [
            (entry.friend.id, [lst.name for lst in entry.lists])
            for entry in view.dashboard.friend_lists
        ] == [
            (social_graph.friend_one.id, ["List C"]),
            (social_graph.friend_two.id, []),
        ]

    @pytest.mark.asyncio
    async def test_fragment_uses_fewer_round_trips(self, session_maker, social_graph):
        async with session_maker() as session:
            fragment_store = RecordStore(session)
            await ViewSelector(fragment_store).select_view(
                social_graph.list_a.id, social_graph.viewer.id, partial=True
            )
        async with session_maker() as session:
            composite_store = RecordStore(session)
            await ViewSelector(composite_store).select_view(
                social_graph.list_a.id, social_graph.viewer.id, partial=False
            )

        assert fragment_store.round_trips == 3
        assert composite_store.round_trips == 7

    @pytest.mark.asyncio
    async def test_not_found_stops_before_dashboard(self, db_session, social_graph):
        store = RecordStore(db_session)
        with patch.object(DashboardService, "assemble_dashboard", new_callable=AsyncMock) as assemble:
            with pytest.raises(ListNotFoundError):
                await ViewSelector(store).select_view(
                    uuid.uuid4(), social_graph.viewer.id, partial=False
                )

        assemble.assert_not_awaited()
        assert store.round_trips == 1

    @pytest.mark.asyncio
    async def test_dashboard_failure_aborts_composite(self, db_session, social_graph):
        """No fallback to a fragment when the dashboard half fails."""
        store = RecordStore(db_session)
        with patch.object(
            DashboardService,
            "assemble_dashboard",
            new_callable=AsyncMock,
            side_effect=StoreFailure("get_friendships"),
        ):
            with pytest.raises(StoreFailure):
                await ViewSelector(store).select_view(
                    social_graph.list_a.id, social_graph.viewer.id, partial=False
                )
