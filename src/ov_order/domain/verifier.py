"""Dual verification of one order: app data hash, then order UID."""

import logging
from dataclasses import dataclass

from src.ov_order.domain.app_data import AppDataVerification, verify_app_data
from src.ov_order.domain.eip712 import ORDER_TYPE_SCHEMA, DomainDescriptor, TypeSchema
from src.ov_order.domain.models import OrderRecord
from src.ov_order.domain.order_uid import UidVerification, verify_order_uid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerificationReport:
    app_data: AppDataVerification
    uid: UidVerification

    @property
    def ok(self) -> bool:
        return self.app_data.ok and self.uid.matches


def verify_order(
    order: OrderRecord,
    owner: bytes,
    reference_uid: bytes,
    app_data_string: str | None,
    domain: DomainDescriptor,
    schema: TypeSchema = ORDER_TYPE_SCHEMA,
) -> VerificationReport:
    """Run both checks. Never raises on a failed check; see the report."""
    app_data = verify_app_data(order.app_data, app_data_string)
    uid = verify_order_uid(order, owner, reference_uid, domain, schema)

    logger.debug("App data check: %s", app_data.outcome.value)
    if not uid.matches:
        logger.warning(
            "UID mismatch: reference=0x%s recomputed=%s parts=%s",
            reference_uid.hex(),
            uid.computed.hex,
            ",".join(uid.mismatched_parts),
        )
    return VerificationReport(app_data=app_data, uid=uid)
