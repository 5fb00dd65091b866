"""Global enums.

Order enums are hashed by their label text, never by ordinal. The label
tables below are the single source of the bytes that enter the EIP-712
struct hash; they must match GPv2Order.sol exactly.
"""

from enum import Enum
from typing import Final


class OrderKind(str, Enum):
    SELL = "sell"
    BUY = "buy"


class OrderBalance(str, Enum):
    """Where the settlement contract pulls sell tokens from / pays buy tokens to."""
    ERC20 = "erc20"
    EXTERNAL = "external"
    INTERNAL = "internal"


class AppDataOutcome(str, Enum):
    """Result of checking appData against keccak256(fullAppData)."""
    VERIFIED_EMPTY = "VERIFIED_EMPTY"  # zero appData, preimage assumed to be "{}"
    VERIFIED = "VERIFIED"
    MISSING_PREIMAGE = "MISSING_PREIMAGE"
    MISMATCH = "MISMATCH"


ORDER_KIND_LABELS: Final[dict[OrderKind, str]] = {
    OrderKind.SELL: "sell",
    OrderKind.BUY: "buy",
}

ORDER_BALANCE_LABELS: Final[dict[OrderBalance, str]] = {
    OrderBalance.ERC20: "erc20",
    OrderBalance.EXTERNAL: "external",
    OrderBalance.INTERNAL: "internal",
}
