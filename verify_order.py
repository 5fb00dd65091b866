"""Verify a CoW Protocol order from the command line.

Usage: python verify_order.py [order_uid]

Fetches the order from the orderbook API of the configured network
(settings.NETWORK) and checks:
  1. appData == keccak256(fullAppData)
  2. the order UID recomputed from the order fields equals the given UID

Exit status is 1 on fetch failure, app data mismatch or UID mismatch.
"""

import asyncio
import sys

from src.ov_common.enums import AppDataOutcome
from src.ov_common.errors import AppError
from src.ov_common.hex_utils import to_hex
from src.ov_order.application.service import OrderVerificationService
from src.ov_order.domain.app_data import EMPTY_APP_DATA
from src.ov_order.domain.verifier import VerificationReport
from src.ov_order.infrastructure.orderbook_client import OrderbookClient

SOME_ORDER_UID = (
    "0x502b1cc8d3da63b55762fa028a5c6ecf0818c765484525fcfe2b63103b173e75"
    "8352b830b2d719aa370cb04a1830c14cf32e3f1a67655feb"
)

_APP_DATA_MESSAGES = {
    AppDataOutcome.VERIFIED_EMPTY: f"✅ Zero app data, the app data can be assumed to be '{EMPTY_APP_DATA}'",
    AppDataOutcome.VERIFIED: "✅ App data matches simplified IPFS hash computation",
    AppDataOutcome.MISSING_PREIMAGE: "❌ Order has no app data preimage",
    AppDataOutcome.MISMATCH: "❌ IPFS hash does not match simple hashing with keccak256",
}


def parse_args(argv: list[str]) -> str | None:
    if len(argv) == 0:
        return SOME_ORDER_UID
    if len(argv) == 1:
        return argv[0]
    return None


def print_report(uid: str, report: VerificationReport) -> int:
    """Print the report, return the process exit status."""
    out = sys.stdout if report.app_data.outcome is not AppDataOutcome.MISMATCH else sys.stderr
    print(_APP_DATA_MESSAGES[report.app_data.outcome], file=out)

    if report.uid.matches:
        print("✅ Recomputed order UID matches with original order UID")
    else:
        print("Original:   ", uid, file=sys.stderr)
        print("Recomputed: ", report.uid.computed.hex, file=sys.stderr)
        print(f"❌ Order UID recomputation failed ({', '.join(report.uid.mismatched_parts)})", file=sys.stderr)

    failed = report.app_data.outcome is AppDataOutcome.MISMATCH or not report.uid.matches
    return 1 if failed else 0


async def run(uid: str, client: OrderbookClient | None = None) -> int:
    client = client or OrderbookClient()
    try:
        report = await OrderVerificationService(client).fetch_and_verify(uid)
    except AppError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 1
    finally:
        await client.aclose()

    computed = report.uid.computed
    print(f"Order hash {to_hex(computed.order_hash)}, owner {computed.owner_address}, validTo {computed.valid_to}")
    return print_report(uid, report)


def main(argv: list[str] | None = None) -> int:
    uid = parse_args(sys.argv[1:] if argv is None else argv)
    if uid is None:
        print("Usage: python verify_order.py [order_uid]", file=sys.stderr)
        return 1
    print(f"Using order with UID {uid}")
    return asyncio.run(run(uid))


if __name__ == "__main__":
    sys.exit(main())
