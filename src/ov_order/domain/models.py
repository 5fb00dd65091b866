"""Order domain model: immutable value object, no I/O dependency.

Field widths are checked at construction time so that a malformed order can
never reach the hashing code.
"""
from dataclasses import dataclass

from src.ov_common.enums import OrderBalance, OrderKind
from src.ov_common.errors import MalformedOrderError
from src.ov_common.hex_utils import ADDRESS_LENGTH, DIGEST_LENGTH

UINT256_MAX = (1 << 256) - 1
UINT32_MAX = (1 << 32) - 1


def check_uint(value: object, bits: int, field: str) -> None:
    """Raise MalformedOrderError unless value is an int in [0, 2**bits - 1]."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedOrderError(f"{field} must be an integer, got {type(value).__name__}")
    if not (0 <= value <= (1 << bits) - 1):
        raise MalformedOrderError(f"{field} out of uint{bits} range: {value}")


def check_bytes(value: object, length: int, field: str) -> None:
    if not isinstance(value, bytes) or len(value) != length:
        raise MalformedOrderError(f"{field} must be exactly {length} bytes")


@dataclass(frozen=True)
class OrderRecord:
    """A GPv2 order as signed by its owner (GPv2Order.Data)."""

    sell_token: bytes
    buy_token: bytes
    receiver: bytes  # zero address means "pay the owner"
    sell_amount: int
    buy_amount: int
    valid_to: int  # unix seconds, uint32
    app_data: bytes  # keccak256 of the fullAppData document
    fee_amount: int
    kind: OrderKind
    partially_fillable: bool
    sell_token_balance: OrderBalance = OrderBalance.ERC20
    buy_token_balance: OrderBalance = OrderBalance.ERC20

    def __post_init__(self) -> None:
        check_bytes(self.sell_token, ADDRESS_LENGTH, "sellToken")
        check_bytes(self.buy_token, ADDRESS_LENGTH, "buyToken")
        check_bytes(self.receiver, ADDRESS_LENGTH, "receiver")
        check_uint(self.sell_amount, 256, "sellAmount")
        check_uint(self.buy_amount, 256, "buyAmount")
        check_uint(self.fee_amount, 256, "feeAmount")
        check_uint(self.valid_to, 32, "validTo")
        check_bytes(self.app_data, DIGEST_LENGTH, "appData")
        if not isinstance(self.kind, OrderKind):
            raise MalformedOrderError(f"kind must be an OrderKind, got {self.kind!r}")
        if not isinstance(self.partially_fillable, bool):
            raise MalformedOrderError("partiallyFillable must be a bool")
        for field, value in (
            ("sellTokenBalance", self.sell_token_balance),
            ("buyTokenBalance", self.buy_token_balance),
        ):
            if not isinstance(value, OrderBalance):
                raise MalformedOrderError(f"{field} must be an OrderBalance, got {value!r}")


def parse_order_kind(label: str) -> OrderKind:
    """'sell' -> OrderKind.SELL. Labels are case-sensitive."""
    try:
        return OrderKind(label)
    except ValueError:
        raise MalformedOrderError(f"unknown order kind label: {label!r}") from None


def parse_order_balance(label: str, field: str = "balance") -> OrderBalance:
    try:
        return OrderBalance(label)
    except ValueError:
        raise MalformedOrderError(f"unknown {field} label: {label!r}") from None
