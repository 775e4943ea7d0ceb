"""Order submission and cancellation endpoints."""

from fastapi import APIRouter, Depends

from brokerage.api.deps import get_order_service
from brokerage.api.schemas import OrderCreateRequest, OrderResponse
from brokerage.services import OrderCreate, OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderResponse, status_code=201)
def create_order(
    request: OrderCreateRequest,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """
    Submit an order.

    Orders that cannot execute against the current portfolio are still
    recorded and returned with status REJECTED.
    """
    order = service.create_order(
        OrderCreate(
            user_id=request.user_id,
            instrument_id=request.instrument_id,
            side=request.side,
            order_type=request.order_type,
            size=request.size,
            amount=request.amount,
            price=request.price,
        )
    )
    return OrderResponse.from_domain(order)


@router.post("/{order_id}/cancel", response_model=OrderResponse)
def cancel_order(
    order_id: int,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """Cancel a NEW order."""
    return OrderResponse.from_domain(service.cancel_order(order_id))
