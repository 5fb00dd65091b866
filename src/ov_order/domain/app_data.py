"""App data verification: appData == keccak256(fullAppData).

The appData field of an order is meant to be the IPFS content identifier of
the document holding the app data JSON (the `fullAppData` string returned by
the orderbook API). For small documents that identifier reduces to the plain
keccak256 of the UTF-8 bytes, which is all this module computes.

Known limitation: IPFS chunks content above a certain size, and for such
documents the identifier is NOT keccak256(content). Those orders are reported
as MISMATCH here. The full computation lives in the CoW services repository:
https://github.com/cowprotocol/services/blob/53ec0677f0a59c2c93770a86117cd16aaa1d3996/crates/app-data/src/app_data_hash.rs#L187-L198
"""
from dataclasses import dataclass

from eth_utils import keccak

from src.ov_common.enums import AppDataOutcome
from src.ov_common.errors import MalformedOrderError, MetadataMismatchError
from src.ov_common.hex_utils import DIGEST_LENGTH, ZERO_DIGEST, to_hex

# Preimage implied by a zero appData
EMPTY_APP_DATA = "{}"


@dataclass(frozen=True)
class AppDataVerification:
    outcome: AppDataOutcome
    expected: bytes
    computed: bytes | None = None  # None when no hash was computed

    @property
    def ok(self) -> bool:
        return self.outcome in (AppDataOutcome.VERIFIED, AppDataOutcome.VERIFIED_EMPTY)

    def raise_for_mismatch(self) -> None:
        """Escalate a MISMATCH outcome into MetadataMismatchError."""
        if self.outcome is AppDataOutcome.MISMATCH and self.computed is not None:
            raise MetadataMismatchError(to_hex(self.expected), to_hex(self.computed))


def app_data_hash(app_data_string: str) -> bytes:
    return keccak(app_data_string.encode("utf-8"))


def verify_app_data(app_data: bytes, app_data_string: str | None) -> AppDataVerification:
    if len(app_data) != DIGEST_LENGTH:
        raise MalformedOrderError(f"appData must be exactly {DIGEST_LENGTH} bytes")

    if app_data == ZERO_DIGEST:
        return AppDataVerification(AppDataOutcome.VERIFIED_EMPTY, app_data)
    if app_data_string is None:
        return AppDataVerification(AppDataOutcome.MISSING_PREIMAGE, app_data)

    computed = app_data_hash(app_data_string)
    outcome = AppDataOutcome.VERIFIED if computed == app_data else AppDataOutcome.MISMATCH
    return AppDataVerification(outcome, app_data, computed)
