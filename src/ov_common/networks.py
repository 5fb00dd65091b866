"""Supported chains: orderbook API path segment and EIP-712 chain id.

GPv2Settlement is deployed at the same address on every supported chain.
Ref: https://docs.cow.fi/cow-protocol/reference/contracts/core#deployments
"""

from dataclasses import dataclass
from typing import Final

from src.ov_common.errors import UnsupportedNetworkError

SETTLEMENT_CONTRACT: Final = "0x9008D19f58AAbD9eD0D60971565AA8510560ab41"


@dataclass(frozen=True)
class Network:
    api_name: str
    chain_id: int


NETWORKS: Final[dict[str, Network]] = {
    "mainnet": Network(api_name="mainnet", chain_id=1),
    "xdai": Network(api_name="xdai", chain_id=100),
    "arbitrum_one": Network(api_name="arbitrum_one", chain_id=42161),
    "base": Network(api_name="base", chain_id=8453),
    "sepolia": Network(api_name="sepolia", chain_id=11155111),
}


def get_network(name: str) -> Network:
    """Look up a network by its API name. Raises UnsupportedNetworkError."""
    try:
        return NETWORKS[name]
    except KeyError:
        raise UnsupportedNetworkError(name) from None
