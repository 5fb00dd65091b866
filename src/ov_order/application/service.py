# src/ov_order/application/service.py
import asyncio
import logging

from src.ov_common.errors import AppError
from src.ov_common.hex_utils import to_hex
from src.ov_common.networks import Network, get_network
from src.ov_order.application.schemas import (
    ApiOrder,
    AppDataCheckResponse,
    BatchItemResponse,
    BatchVerifyResponse,
    UidCheckResponse,
    VerificationResponse,
)
from src.ov_order.domain.eip712 import gpv2_domain
from src.ov_order.domain.order_uid import OrderUid
from src.ov_order.domain.verifier import VerificationReport, verify_order
from src.ov_order.infrastructure.orderbook_client import OrderbookClient

logger = logging.getLogger(__name__)


def verify_api_order(api_order: ApiOrder, reference_uid: str, network: Network) -> VerificationReport:
    """Verify an orderbook order against the UID the caller asked for.

    Input validation (UID shape, field widths, enum labels) happens before
    any hashing and raises InvalidOrderUidError / MalformedOrderError.
    """
    reference = OrderUid.from_hex(reference_uid).to_bytes()
    return verify_order(
        api_order.to_record(),
        owner=api_order.owner_bytes(),
        reference_uid=reference,
        app_data_string=api_order.full_app_data,
        domain=gpv2_domain(chain_id=network.chain_id),
    )


def _report_to_response(report: VerificationReport, uid: str, network: Network) -> VerificationResponse:
    computed = report.uid.computed
    return VerificationResponse(
        uid=uid,
        network=network.api_name,
        ok=report.ok,
        app_data=AppDataCheckResponse(
            outcome=report.app_data.outcome,
            ok=report.app_data.ok,
            app_data=to_hex(report.app_data.expected),
            computed_hash=None if report.app_data.computed is None else to_hex(report.app_data.computed),
        ),
        uid_check=UidCheckResponse(
            matches=report.uid.matches,
            reference_uid=to_hex(report.uid.reference),
            computed_uid=computed.hex,
            order_hash=to_hex(computed.order_hash),
            owner=computed.owner_address,
            valid_to=computed.valid_to,
            mismatched_parts=report.uid.mismatched_parts,
        ),
    )


class OrderVerificationService:
    def __init__(self, client: OrderbookClient) -> None:
        self._client = client

    async def fetch_and_verify(self, uid: str) -> VerificationReport:
        OrderUid.from_hex(uid)  # reject malformed UIDs before any request
        api_order = await self._client.get_order(uid)
        report = verify_api_order(api_order, uid, self._client.network)
        logger.info(
            "Verified order %s: app_data=%s uid_match=%s",
            uid, report.app_data.outcome.value, report.uid.matches,
        )
        return report

    async def verify_uid(self, uid: str, strict: bool = False) -> VerificationResponse:
        """Fetch and verify one order. With strict=True a UID mismatch raises IdentifierMismatchError."""
        report = await self.fetch_and_verify(uid)
        if strict:
            report.uid.raise_for_mismatch()
        return _report_to_response(report, uid, self._client.network)

    async def verify_uids(self, uids: list[str]) -> BatchVerifyResponse:
        """Verify many orders concurrently; a failing UID does not abort the batch."""
        results = await asyncio.gather(
            *(self.verify_uid(uid) for uid in uids), return_exceptions=True
        )
        items: list[BatchItemResponse] = []
        for uid, result in zip(uids, results):
            if isinstance(result, AppError):
                items.append(BatchItemResponse(
                    uid=uid, ok=False, error_code=result.code, error_message=result.message,
                ))
            elif isinstance(result, BaseException):
                raise result
            else:
                items.append(BatchItemResponse(uid=uid, ok=result.ok, result=result))

        verified = sum(1 for item in items if item.ok)
        return BatchVerifyResponse(items=items, verified_count=verified, failed_count=len(items) - verified)


def verify_payload(api_order: ApiOrder, network_name: str) -> VerificationResponse:
    """Offline verification of a caller-supplied orderbook payload (no fetch)."""
    network = get_network(network_name)
    report = verify_api_order(api_order, api_order.uid, network)
    return _report_to_response(report, api_order.uid, network)
