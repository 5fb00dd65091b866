"""EIP-712 typed structured data hashing for GPv2 orders.

    domainSeparator = hashStruct(EIP712Domain)
    structHash      = hashStruct(Order)
    orderHash       = keccak256(0x19 0x01 ‖ domainSeparator ‖ structHash)

hashStruct(s) = keccak256(typeHash ‖ encodeData(s)), where every member is
one 32-byte word: addresses left-padded, integers big-endian, bool as 0/1,
bytes32 as-is, and dynamic `string`/`bytes` members replaced by the keccak256
of their content.

Only flat struct types are supported (no nested structs or arrays); GPv2
orders and the EIP712Domain struct need nothing more.

Ref: https://eips.ethereum.org/EIPS/eip-712
Ref: https://github.com/cowprotocol/contracts/blob/v1/src/contracts/libraries/GPv2Order.sol
"""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from eth_abi import encode
from eth_utils import keccak

from src.ov_common.enums import ORDER_BALANCE_LABELS, ORDER_KIND_LABELS
from src.ov_common.hex_utils import parse_address
from src.ov_common.networks import SETTLEMENT_CONTRACT
from src.ov_order.domain.models import OrderRecord

EIP191_PREFIX: Final = b"\x19\x01"

# Members hashed by content instead of being ABI-encoded in place
_DYNAMIC_TYPES = frozenset({"string", "bytes"})


@dataclass(frozen=True)
class TypeField:
    name: str
    type: str


@dataclass(frozen=True)
class TypeSchema:
    """Ordered member list of one EIP-712 struct type. Order is part of the hash."""

    primary_type: str
    fields: tuple[TypeField, ...]

    def encode_type(self) -> str:
        """Order(address sellToken,address buyToken,...)"""
        members = ",".join(f"{f.type} {f.name}" for f in self.fields)
        return f"{self.primary_type}({members})"

    def type_hash(self) -> bytes:
        return keccak(text=self.encode_type())


@dataclass(frozen=True)
class DomainDescriptor:
    name: str
    version: str
    chain_id: int
    verifying_contract: bytes  # 20 raw bytes


EIP712_DOMAIN_SCHEMA: Final = TypeSchema(
    primary_type="EIP712Domain",
    fields=(
        TypeField("name", "string"),
        TypeField("version", "string"),
        TypeField("chainId", "uint256"),
        TypeField("verifyingContract", "address"),
    ),
)

# GPv2Order.TYPE_HASH. Member names follow the signed message, not the
# Solidity struct (which has no separate label fields).
ORDER_TYPE_SCHEMA: Final = TypeSchema(
    primary_type="Order",
    fields=(
        TypeField("sellToken", "address"),
        TypeField("buyToken", "address"),
        TypeField("receiver", "address"),
        TypeField("sellAmount", "uint256"),
        TypeField("buyAmount", "uint256"),
        TypeField("validTo", "uint32"),
        TypeField("appData", "bytes32"),
        TypeField("feeAmount", "uint256"),
        TypeField("kind", "string"),
        TypeField("partiallyFillable", "bool"),
        TypeField("sellTokenBalance", "string"),
        TypeField("buyTokenBalance", "string"),
    ),
)

GPV2_DOMAIN_NAME: Final = "Gnosis Protocol"
GPV2_DOMAIN_VERSION: Final = "v2"


def gpv2_domain(chain_id: int = 1, verifying_contract: str = SETTLEMENT_CONTRACT) -> DomainDescriptor:
    """Domain of GPv2Settlement (GPv2Signing.sol) on the given chain."""
    return DomainDescriptor(
        name=GPV2_DOMAIN_NAME,
        version=GPV2_DOMAIN_VERSION,
        chain_id=chain_id,
        verifying_contract=parse_address(verifying_contract, "verifyingContract"),
    )


def encode_data(schema: TypeSchema, values: Mapping[str, object]) -> bytes:
    """typeHash ‖ one 32-byte word per member, in schema order."""
    abi_types: list[str] = []
    abi_values: list[object] = []
    for f in schema.fields:
        value = values[f.name]
        if f.type in _DYNAMIC_TYPES:
            content = value.encode("utf-8") if isinstance(value, str) else value
            abi_types.append("bytes32")
            abi_values.append(keccak(content))
        else:
            abi_types.append(f.type)
            abi_values.append(value)
    return schema.type_hash() + encode(abi_types, abi_values)


def hash_struct(schema: TypeSchema, values: Mapping[str, object]) -> bytes:
    return keccak(encode_data(schema, values))


def domain_separator(domain: DomainDescriptor) -> bytes:
    return hash_struct(
        EIP712_DOMAIN_SCHEMA,
        {
            "name": domain.name,
            "version": domain.version,
            "chainId": domain.chain_id,
            "verifyingContract": domain.verifying_contract,
        },
    )


def hash_typed_data(domain: DomainDescriptor, schema: TypeSchema, values: Mapping[str, object]) -> bytes:
    """keccak256(0x1901 ‖ domainSeparator ‖ structHash), 66 bytes hashed once."""
    return keccak(EIP191_PREFIX + domain_separator(domain) + hash_struct(schema, values))


def order_message(order: OrderRecord) -> dict[str, object]:
    """Map an OrderRecord onto the member names of ORDER_TYPE_SCHEMA.

    Enum members go through the label tables so the hashed text is always
    the canonical lowercase label.
    """
    return {
        "sellToken": order.sell_token,
        "buyToken": order.buy_token,
        "receiver": order.receiver,
        "sellAmount": order.sell_amount,
        "buyAmount": order.buy_amount,
        "validTo": order.valid_to,
        "appData": order.app_data,
        "feeAmount": order.fee_amount,
        "kind": ORDER_KIND_LABELS[order.kind],
        "partiallyFillable": order.partially_fillable,
        "sellTokenBalance": ORDER_BALANCE_LABELS[order.sell_token_balance],
        "buyTokenBalance": ORDER_BALANCE_LABELS[order.buy_token_balance],
    }


def order_hash(
    order: OrderRecord,
    domain: DomainDescriptor,
    schema: TypeSchema = ORDER_TYPE_SCHEMA,
) -> bytes:
    return hash_typed_data(domain, schema, order_message(order))
