"""Checkout and order tracking endpoints."""

from fastapi import APIRouter, Depends

from sokobo.access.gate import Principal
from sokobo.api.dependencies import ADMIN_ONLY, authenticated, order_service
from sokobo.api.schemas import CreateOrderRequest, OrderResponse, UpdateOrderStatusRequest
from sokobo.ordering.services import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


def _order(order) -> OrderResponse:
    return OrderResponse.model_validate(order.to_dict())


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    principal: Principal = Depends(authenticated),
    orders: OrderService = Depends(order_service),
) -> list[OrderResponse]:
    """Administrators see every order; customers see their own."""
    return [_order(o) for o in orders.visible_to(principal)]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    principal: Principal = Depends(authenticated),
    orders: OrderService = Depends(order_service),
) -> OrderResponse:
    return _order(orders.get_for(principal, order_id))


@router.post("", status_code=201, response_model=OrderResponse)
async def place_order(
    body: CreateOrderRequest,
    principal: Principal = Depends(authenticated),
    orders: OrderService = Depends(order_service),
) -> OrderResponse:
    order = orders.place(
        user_id=principal.id,
        items=[line.model_dump() for line in body.items],
        total=body.total,
        shipping_address=body.shipping_address.model_dump(),
    )
    return _order(order)


@router.put("/{order_id}/status", response_model=OrderResponse, dependencies=ADMIN_ONLY)
async def update_order_status(
    order_id: str,
    body: UpdateOrderStatusRequest,
    orders: OrderService = Depends(order_service),
) -> OrderResponse:
    return _order(orders.set_status(order_id, body.status))
