# src/ov_order/application/schemas.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from config.settings import settings
from src.ov_common.enums import AppDataOutcome
from src.ov_common.errors import MalformedOrderError
from src.ov_common.hex_utils import ZERO_ADDRESS, parse_address, parse_digest
from src.ov_order.domain.models import OrderRecord, parse_order_balance, parse_order_kind


def _parse_uint(value: str, field: str) -> int:
    """Orderbook amounts are decimal strings ("1000000000000000000")."""
    if not (value.isascii() and value.isdigit()):
        raise MalformedOrderError(f"{field} is not a decimal integer: {value!r}")
    return int(value)


class ApiOrder(BaseModel):
    """Order as returned by GET /api/v1/orders/{uid} (camelCase JSON).

    Only the fields needed for verification are declared; everything else the
    orderbook returns is ignored.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    uid: str
    owner: str
    sell_token: str
    buy_token: str
    receiver: str | None = None  # null in the API means the zero address
    sell_amount: str
    buy_amount: str
    valid_to: int
    app_data: str
    full_app_data: str | None = None
    fee_amount: str
    kind: str
    partially_fillable: bool
    sell_token_balance: str = "erc20"
    buy_token_balance: str = "erc20"
    # Informational only
    status: str | None = None
    signing_scheme: str | None = None
    creation_date: str | None = None

    def owner_bytes(self) -> bytes:
        return parse_address(self.owner, "owner")

    def to_record(self) -> OrderRecord:
        """Map to the domain record. Raises MalformedOrderError before any hashing."""
        return OrderRecord(
            sell_token=parse_address(self.sell_token, "sellToken"),
            buy_token=parse_address(self.buy_token, "buyToken"),
            receiver=ZERO_ADDRESS if self.receiver is None else parse_address(self.receiver, "receiver"),
            sell_amount=_parse_uint(self.sell_amount, "sellAmount"),
            buy_amount=_parse_uint(self.buy_amount, "buyAmount"),
            valid_to=self.valid_to,
            app_data=parse_digest(self.app_data, "appData"),
            fee_amount=_parse_uint(self.fee_amount, "feeAmount"),
            kind=parse_order_kind(self.kind),
            partially_fillable=self.partially_fillable,
            sell_token_balance=parse_order_balance(self.sell_token_balance, "sellTokenBalance"),
            buy_token_balance=parse_order_balance(self.buy_token_balance, "buyTokenBalance"),
        )


class BatchVerifyRequest(BaseModel):
    uids: list[str] = Field(min_length=1)

    @field_validator("uids")
    @classmethod
    def within_batch_limit(cls, v: list[str]) -> list[str]:
        if len(v) > settings.BATCH_MAX_UIDS:
            raise ValueError(f"at most {settings.BATCH_MAX_UIDS} uids per batch")
        return v


class AppDataCheckResponse(BaseModel):
    outcome: AppDataOutcome
    ok: bool
    app_data: str
    computed_hash: str | None = None


class UidCheckResponse(BaseModel):
    matches: bool
    reference_uid: str
    computed_uid: str
    order_hash: str
    owner: str
    valid_to: int
    mismatched_parts: list[str]


class VerificationResponse(BaseModel):
    uid: str
    network: str
    ok: bool
    app_data: AppDataCheckResponse
    uid_check: UidCheckResponse


class BatchItemResponse(BaseModel):
    uid: str
    ok: bool
    result: VerificationResponse | None = None
    error_code: int | None = None
    error_message: str | None = None


class BatchVerifyResponse(BaseModel):
    items: list[BatchItemResponse]
    verified_count: int
    failed_count: int
