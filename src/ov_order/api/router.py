# src/ov_order/api/router.py
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from config.settings import settings
from src.ov_common.response import ApiResponse, success_response
from src.ov_order.application import service as svc
from src.ov_order.application.schemas import ApiOrder, BatchVerifyRequest
from src.ov_order.infrastructure.orderbook_client import OrderbookClient, get_orderbook_client

router = APIRouter(prefix="/orders", tags=["orders"])


def get_verification_service(
    client: Annotated[OrderbookClient, Depends(get_orderbook_client)],
) -> svc.OrderVerificationService:
    return svc.OrderVerificationService(client)


@router.get("/{uid}/verify", response_model=ApiResponse)
async def verify_order_uid(
    uid: str,
    request: Request,
    service: Annotated[svc.OrderVerificationService, Depends(get_verification_service)],
    strict: bool = Query(False, description="Fail with 4101 when the recomputed UID differs"),
) -> ApiResponse:
    result = await service.verify_uid(uid, strict=strict)
    return success_response(result.model_dump(mode="json"), request.state.request_id)


@router.post("/verify", response_model=ApiResponse)
async def verify_order_payload(
    order: ApiOrder,
    request: Request,
    network: str = Query(settings.NETWORK, description="Network the order was placed on"),
) -> ApiResponse:
    result = svc.verify_payload(order, network)
    return success_response(result.model_dump(mode="json"), request.state.request_id)


@router.post("/verify/batch", response_model=ApiResponse)
async def verify_order_batch(
    req: BatchVerifyRequest,
    request: Request,
    service: Annotated[svc.OrderVerificationService, Depends(get_verification_service)],
) -> ApiResponse:
    result = await service.verify_uids(req.uids)
    return success_response(result.model_dump(mode="json"), request.state.request_id)
