"""Translation between API messages and the order service."""

from __future__ import annotations

import logging
import re

from ordersvc.entity import OrderItem
from ordersvc.messages import (
    CreateOrderRequest,
    CreateOrderResponse,
    GetOrderRequest,
    GetOrderResponse,
    OrderItemMessage,
)
from ordersvc.service import OrderService

_log = logging.getLogger(__name__)

_INT_TEXT = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def _parse_int64(text: str, what: str) -> int:
    if not _INT_TEXT.fullmatch(text):
        raise ValueError(f"invalid {what}: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"{what} out of range: {text!r}")
    return value


def create_order(service: OrderService, request: CreateOrderRequest) -> CreateOrderResponse:
    """Place an order and answer with its order number."""
    items = [
        OrderItem(
            product_id=str(item.product_id),
            quantity=int(item.quantity),
            price=item.price,
        )
        for item in request.items
    ]
    try:
        order = service.create_order(request.user_id, items)
    except Exception as exc:
        _log.error("CreateOrder failed: %s", exc)
        raise
    return CreateOrderResponse(order_id=order.order_sn, success=True)


def get_order(service: OrderService, request: GetOrderRequest) -> GetOrderResponse:
    """Look up an order by its numeric id; an empty response if there is none."""
    try:
        order_id = _parse_int64(request.order_id, "order id")
    except ValueError:
        _log.error("Invalid order id: %s", request.order_id)
        raise

    try:
        order = service.get_order_detail(order_id)
    except Exception as exc:
        _log.error("GetOrderDetail failed: %s", exc)
        raise
    if order is None:
        return GetOrderResponse()

    items = [
        OrderItemMessage(
            product_id=_parse_int64(item.product_id, "product id"),
            quantity=int(item.quantity),
            price=item.price,
        )
        for item in order.items
    ]
    return GetOrderResponse(
        order_id=order.order_sn,
        user_id=order.user_id,
        status=str(int(order.status)),
        items=items,
        total_amount=order.total_amount,
    )