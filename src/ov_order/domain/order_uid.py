"""Order UID: orderHash(32) ‖ owner(20) ‖ validTo(4, big endian) = 56 bytes.

Same layout as GPv2Order.packOrderUidParams in the settlement contracts.
"""
from dataclasses import dataclass

from src.ov_common.errors import IdentifierMismatchError, InvalidOrderUidError, MalformedOrderError
from src.ov_common.hex_utils import ADDRESS_LENGTH, DIGEST_LENGTH, to_address, to_hex
from src.ov_order.domain.eip712 import ORDER_TYPE_SCHEMA, DomainDescriptor, TypeSchema, order_hash
from src.ov_order.domain.models import OrderRecord, check_bytes, check_uint

VALID_TO_LENGTH = 4
UID_LENGTH = DIGEST_LENGTH + ADDRESS_LENGTH + VALID_TO_LENGTH


@dataclass(frozen=True)
class OrderUid:
    order_hash: bytes
    owner: bytes
    valid_to: int

    def __post_init__(self) -> None:
        check_bytes(self.order_hash, DIGEST_LENGTH, "orderHash")
        check_bytes(self.owner, ADDRESS_LENGTH, "owner")
        check_uint(self.valid_to, 32, "validTo")

    def to_bytes(self) -> bytes:
        return self.order_hash + self.owner + self.valid_to.to_bytes(VALID_TO_LENGTH, "big")

    @property
    def hex(self) -> str:
        return to_hex(self.to_bytes())

    @property
    def owner_address(self) -> str:
        return to_address(self.owner)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "OrderUid":
        if len(raw) != UID_LENGTH:
            raise InvalidOrderUidError(to_hex(raw))
        return cls(
            order_hash=raw[:DIGEST_LENGTH],
            owner=raw[DIGEST_LENGTH:DIGEST_LENGTH + ADDRESS_LENGTH],
            valid_to=int.from_bytes(raw[DIGEST_LENGTH + ADDRESS_LENGTH:], "big"),
        )

    @classmethod
    def from_hex(cls, uid: str) -> "OrderUid":
        """Parse a 0x-prefixed 112-hex-digit UID. Raises InvalidOrderUidError."""
        body = uid[2:] if uid.startswith(("0x", "0X")) else None
        if body is None or len(body) != UID_LENGTH * 2:
            raise InvalidOrderUidError(uid)
        try:
            raw = bytes.fromhex(body)
        except ValueError:
            raise InvalidOrderUidError(uid) from None
        return cls.from_bytes(raw)


def compute_order_uid(
    order: OrderRecord,
    owner: bytes,
    domain: DomainDescriptor,
    schema: TypeSchema = ORDER_TYPE_SCHEMA,
) -> OrderUid:
    check_bytes(owner, ADDRESS_LENGTH, "owner")
    return OrderUid(order_hash=order_hash(order, domain, schema), owner=owner, valid_to=order.valid_to)


@dataclass(frozen=True)
class UidVerification:
    computed: OrderUid
    reference: bytes  # as asserted by the caller, may be of any length

    @property
    def matches(self) -> bool:
        return self.computed.to_bytes() == self.reference

    @property
    def mismatched_parts(self) -> list[str]:
        """Names of the UID segments that differ; the whole UID if the reference has the wrong length."""
        if self.matches:
            return []
        if len(self.reference) != UID_LENGTH:
            return ["uid"]
        reference = OrderUid.from_bytes(self.reference)
        parts = []
        if reference.order_hash != self.computed.order_hash:
            parts.append("order_hash")
        if reference.owner != self.computed.owner:
            parts.append("owner")
        if reference.valid_to != self.computed.valid_to:
            parts.append("valid_to")
        return parts

    def raise_for_mismatch(self) -> None:
        if not self.matches:
            raise IdentifierMismatchError(to_hex(self.reference), self.computed.hex)


def verify_order_uid(
    order: OrderRecord,
    owner: bytes,
    reference_uid: bytes,
    domain: DomainDescriptor,
    schema: TypeSchema = ORDER_TYPE_SCHEMA,
) -> UidVerification:
    """Recompute the UID and compare it byte-for-byte with reference_uid."""
    if not isinstance(reference_uid, bytes):
        raise MalformedOrderError("reference UID must be bytes")
    return UidVerification(computed=compute_order_uid(order, owner, domain, schema), reference=reference_uid)
