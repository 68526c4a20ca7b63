"""Application service for placing, reading and cancelling orders."""

from __future__ import annotations

import uuid
from collections.abc import Iterable

from ordersvc.entity import Order, OrderItem, OrderStatus
from ordersvc.repository import OrderRepository


class OrderServiceError(Exception):
    """A business rule rejected the requested operation."""


class OrderService:
    """Use cases of the order service on top of an order repository."""

    def __init__(self, repository: OrderRepository) -> None:
        self._repository = repository

    def create_order(self, user_id: int, items: Iterable[OrderItem]) -> Order:
        """Create a pending order with a fresh order number and store it."""
        order = Order(
            order_sn=f"SN-{uuid.uuid4()}",
            user_id=user_id,
            status=OrderStatus.PENDING_PAYMENT,
            items=list(items),
        )
        order.calculate_total_amount()
        self._repository.create_order(order)
        return order

    def get_order_detail(self, order_id: int) -> Order | None:
        """Return the full order, or None when it does not exist."""
        return self._repository.find_order_by_id(order_id)

    def cancel_order(self, order_id: int) -> None:
        """Cancel an order that is still awaiting payment."""
        order = self._repository.find_order_by_id(order_id)
        if order is None:
            raise OrderServiceError("order not found")
        if not order.can_cancel():
            raise OrderServiceError(
                f"order cannot be cancelled, status is {int(order.status)}"
            )
        self._repository.update_order_status(order_id, OrderStatus.CANCELLED)