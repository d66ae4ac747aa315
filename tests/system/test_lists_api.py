"""
System test: the HTML endpoints in-process over ASGI with SQLite.
"""

import logging
import uuid
from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from listshare.api.deps import get_store, get_viewer_id
from listshare.database import get_db
from listshare.kernel.store import RecordStore
from listshare.main import app


@pytest_asyncio.fixture
async def client(session_maker, social_graph):
    """Async client wired to the test database, viewing as V."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_viewer_id] = lambda: social_graph.viewer.id
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_root_redirects_to_lists(client: AsyncClient):
    r = await client.get("/")
    assert r.status_code in (302, 307)
    assert r.headers["location"] == "/lists"


@pytest.mark.asyncio
async def test_dashboard_page(client: AsyncClient):
    r = await client.get("/lists")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")

    html = r.text
    for name in ("List A", "List B", "List C", "Fred One", "Fiona Two"):
        assert name in html
    # Strangers and their lists are not on the dashboard
    assert "List D" not in html
    assert "Sam Stranger" not in html


@pytest.mark.asyncio
async def test_list_page_fragment_for_htmx(client: AsyncClient, social_graph):
    r = await client.get(f"/lists/{social_graph.list_a.id}", headers={"HX-Request": "true"})
    assert r.status_code == 200
    assert r.headers["vary"] == "HX-Request"

    html = r.text
    assert 'class="list-detail"' in html
    assert "Kettle" in html and "Scarf" in html and "Old idea" in html
    assert "<nav>" not in html
    assert "Fred One" not in html


@pytest.mark.asyncio
@pytest.mark.parametrize("headers", [{}, {"HX-Request": "false"}, {"HX-Request": "TRUE"}])
async def test_list_page_composite_otherwise(client: AsyncClient, social_graph, headers):
    r = await client.get(f"/lists/{social_graph.list_c.id}", headers=headers)
    assert r.status_code == 200

    html = r.text
    assert "<nav>" in html
    assert 'class="list-detail"' in html
    assert "Telescope" in html
    assert "Fiona Two" in html


@pytest.mark.asyncio
async def test_unknown_list_is_404(client: AsyncClient):
    r = await client.get(f"/lists/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.headers["content-type"].startswith("text/html")
    assert "List not found" in r.text


@pytest.mark.asyncio
async def test_malformed_list_id_is_404(client: AsyncClient):
    r = await client.get("/lists/not-a-uuid")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient):
    r = await client.get("/lists", headers={"X-Request-ID": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"


@pytest.mark.asyncio
async def test_store_failure_is_500_html(client: AsyncClient):
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))
    app.dependency_overrides[get_store] = lambda: RecordStore(session)

    r = await client.get("/lists")

    assert r.status_code == 500
    assert r.headers["content-type"].startswith("text/html")
    assert "Server Error" in r.text
    assert "connection lost" not in r.text


def _served(caplog):
    return [r for r in caplog.records if r.getMessage() == "Request served"]


@pytest.mark.asyncio
async def test_access_log_reports_dashboard_queries(client: AsyncClient, caplog):
    with caplog.at_level(logging.INFO, logger="listshare.api.middleware.request_context"):
        r = await client.get("/lists", headers={"X-Request-ID": "dash-1"})

    assert r.status_code == 200
    (record,) = _served(caplog)
    assert record.path == "/lists"
    assert record.status == 200
    assert record.view == "page"
    assert record.store_round_trips == 4


@pytest.mark.asyncio
async def test_access_log_reports_fragment_view(client: AsyncClient, social_graph, caplog):
    with caplog.at_level(logging.INFO, logger="listshare.api.middleware.request_context"):
        await client.get(f"/lists/{social_graph.list_a.id}", headers={"HX-Request": "true"})

    (record,) = _served(caplog)
    assert record.view == "fragment"
    # get_list, get_user, get_items_for_list
    assert record.store_round_trips == 3


@pytest.mark.asyncio
async def test_store_failure_is_logged_once_at_error(client: AsyncClient, caplog):
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))
    app.dependency_overrides[get_store] = lambda: RecordStore(session)

    with caplog.at_level(logging.INFO, logger="listshare"):
        r = await client.get("/lists")

    assert r.status_code == 500
    errors = [rec for rec in caplog.records if rec.levelno >= logging.ERROR]
    assert [rec.getMessage() for rec in errors] == ["Store read failed"]
