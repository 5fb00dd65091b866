"""Orderbook API client: the only I/O in the verification flow.

GET {ORDERBOOK_API_URL}/{network}/api/v1/orders/{uid}

No retries and no caching: every call is a single request.
"""

import logging

import httpx
from pydantic import ValidationError

from config.settings import settings
from src.ov_common.errors import MalformedOrderError, OrderNotFoundError, UpstreamApiError
from src.ov_common.networks import get_network
from src.ov_order.application.schemas import ApiOrder

logger = logging.getLogger(__name__)


class OrderbookClient:
    def __init__(
        self,
        base_url: str = settings.ORDERBOOK_API_URL,
        network: str = settings.NETWORK,
        timeout: float = settings.HTTP_TIMEOUT_SECONDS,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.network = get_network(network)
        self._base_url = base_url.rstrip("/")
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    def order_url(self, uid: str) -> str:
        return f"{self._base_url}/{self.network.api_name}/api/v1/orders/{uid}"

    async def get_order(self, uid: str) -> ApiOrder:
        url = self.order_url(uid)
        try:
            response = await self._http.get(url)
        except httpx.HTTPError as e:
            logger.error("Failed HTTP request to %s: %s", url, e)
            raise UpstreamApiError(f"{type(e).__name__}: {e}") from e

        if response.status_code == 404:
            raise OrderNotFoundError(uid)
        if response.is_error:
            logger.error("Failed HTTP request to %s → %d", url, response.status_code)
            raise UpstreamApiError(f"HTTP {response.status_code} from {url}")

        try:
            return ApiOrder.model_validate_json(response.content)
        except ValidationError as e:
            raise MalformedOrderError(f"unexpected orderbook response: {e.error_count()} invalid field(s)") from e

    async def aclose(self) -> None:
        await self._http.aclose()


_client: OrderbookClient | None = None


def get_orderbook_client() -> OrderbookClient:
    """Get or create the shared client (FastAPI dependency)."""
    global _client  # noqa: PLW0603
    if _client is None:
        _client = OrderbookClient()
    return _client


async def close_orderbook_client() -> None:
    global _client  # noqa: PLW0603
    if _client is not None:
        await _client.aclose()
        _client = None
