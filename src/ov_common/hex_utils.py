"""Fixed-width hex <-> bytes helpers.

Addresses, digests and UIDs travel as 0x-prefixed hex strings in the API and
as raw bytes in the domain layer. Every width check lives here so malformed
input is rejected before anything is hashed.
"""

from eth_utils import decode_hex, encode_hex, is_hex, to_checksum_address

from src.ov_common.errors import MalformedOrderError

ADDRESS_LENGTH = 20
DIGEST_LENGTH = 32
ZERO_ADDRESS = bytes(ADDRESS_LENGTH)
ZERO_DIGEST = bytes(DIGEST_LENGTH)


def parse_fixed_bytes(value: str | bytes, length: int, field: str) -> bytes:
    """Return `value` as exactly `length` raw bytes or raise MalformedOrderError."""
    if isinstance(value, str):
        if not value.startswith(("0x", "0X")) or not is_hex(value):
            raise MalformedOrderError(f"{field} is not 0x-prefixed hex: {value!r}")
        raw = decode_hex(value)
    elif isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    else:
        raise MalformedOrderError(f"{field} must be hex string or bytes, got {type(value).__name__}")

    if len(raw) != length:
        raise MalformedOrderError(f"{field} must be {length} bytes, got {len(raw)}")
    return raw


def parse_address(value: str | bytes, field: str = "address") -> bytes:
    return parse_fixed_bytes(value, ADDRESS_LENGTH, field)


def parse_digest(value: str | bytes, field: str = "digest") -> bytes:
    return parse_fixed_bytes(value, DIGEST_LENGTH, field)


def to_hex(raw: bytes) -> str:
    """b'\\x12\\xab' -> '0x12ab' (lowercase)."""
    return encode_hex(raw)


def to_address(raw: bytes) -> str:
    """20 raw bytes -> EIP-55 checksummed address string."""
    return to_checksum_address(raw)
