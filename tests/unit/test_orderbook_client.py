"""Unit tests for OrderbookClient using httpx.MockTransport (no network)."""
from collections.abc import Callable

import httpx
import pytest

from src.ov_common.errors import MalformedOrderError, OrderNotFoundError, UnsupportedNetworkError, UpstreamApiError
from src.ov_order.infrastructure.orderbook_client import OrderbookClient
from tests.order_fixtures import api_payload

UID = api_payload()["uid"]


def _client(handler: Callable[[httpx.Request], httpx.Response], network: str = "mainnet") -> OrderbookClient:
    return OrderbookClient(
        base_url="https://api.example/",
        network=network,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


class TestGetOrder:
    async def test_success(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json=api_payload())

        client = _client(handler)
        order = await client.get_order(UID)
        await client.aclose()

        assert order.uid == UID
        assert seen == [f"https://api.example/mainnet/api/v1/orders/{UID}"]

    async def test_network_path(self) -> None:
        client = _client(lambda r: httpx.Response(200, json=api_payload()), network="xdai")
        assert client.order_url("0x01") == "https://api.example/xdai/api/v1/orders/0x01"
        assert client.network.chain_id == 100

    async def test_not_found(self) -> None:
        client = _client(lambda r: httpx.Response(404, json={"errorType": "NotFound"}))
        with pytest.raises(OrderNotFoundError) as exc_info:
            await client.get_order(UID)
        assert exc_info.value.code == 4004

    async def test_server_error(self) -> None:
        client = _client(lambda r: httpx.Response(503, text="unavailable"))
        with pytest.raises(UpstreamApiError) as exc_info:
            await client.get_order(UID)
        assert exc_info.value.http_status == 502

    async def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(handler)
        with pytest.raises(UpstreamApiError):
            await client.get_order(UID)

    async def test_unexpected_body(self) -> None:
        client = _client(lambda r: httpx.Response(200, json={"uid": UID}))
        with pytest.raises(MalformedOrderError):
            await client.get_order(UID)

    async def test_invalid_json(self) -> None:
        client = _client(lambda r: httpx.Response(200, text="<html>"))
        with pytest.raises(MalformedOrderError):
            await client.get_order(UID)


def test_unsupported_network() -> None:
    with pytest.raises(UnsupportedNetworkError):
        OrderbookClient(network="ropsten", http_client=httpx.AsyncClient())
