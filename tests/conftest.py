"""Shared test fixtures."""

from collections.abc import AsyncGenerator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.ov_order.infrastructure.orderbook_client import OrderbookClient, get_orderbook_client
from tests.order_fixtures import api_payload


@pytest.fixture
def orderbook_orders() -> dict[str, dict[str, object]]:
    """uid -> orderbook JSON served by the fake orderbook API."""
    payload = api_payload()
    return {str(payload["uid"]): payload}


@pytest.fixture
async def client(orderbook_orders: dict[str, dict[str, object]]) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for the FastAPI app, with the orderbook API faked in-process."""

    def handler(request: httpx.Request) -> httpx.Response:
        uid = request.url.path.rsplit("/", 1)[-1]
        if uid not in orderbook_orders:
            return httpx.Response(404, json={"errorType": "NotFound"})
        return httpx.Response(200, json=orderbook_orders[uid])

    orderbook = OrderbookClient(
        base_url="https://orderbook.test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    app.dependency_overrides[get_orderbook_client] = lambda: orderbook

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    await orderbook.aclose()
