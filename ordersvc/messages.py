"""Request and response messages of the order API."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_INT_TEXT = re.compile(r"[+-]?[0-9]+")
_INT32 = (-(2**31), 2**31 - 1)
_INT64 = (-(2**63), 2**63 - 1)
_MISSING = object()


def _get(data: Mapping[str, Any], snake: str, camel: str) -> Any:
    if snake in data:
        return data[snake]
    if camel in data:
        return data[camel]
    return _MISSING


def _as_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object")
    return data


def _as_int(value: Any, name: str, bounds: tuple[int, int]) -> int:
    if value is _MISSING or value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"field {name!r} must be an integer")
    if isinstance(value, str):
        if not _INT_TEXT.fullmatch(value):
            raise ValueError(f"field {name!r} must be an integer, got {value!r}")
        value = int(value)
    elif isinstance(value, float) and value.is_integer():
        value = int(value)
    elif not isinstance(value, int):
        raise ValueError(f"field {name!r} must be an integer")
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"field {name!r} is out of range: {value}")
    return value


def _as_float(value: Any, name: str) -> float:
    if value is _MISSING or value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {name!r} must be a number")
    return float(value)


def _as_str(value: Any, name: str) -> str:
    if value is _MISSING or value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {name!r} must be a string")
    return value


@dataclass
class OrderItemMessage:
    """One order line as it travels over the wire."""

    product_id: int = 0
    quantity: int = 0
    price: float = 0.0


def _item_from_dict(data: Any) -> OrderItemMessage:
    data = _as_mapping(data, "order item")
    return OrderItemMessage(
        product_id=_as_int(_get(data, "product_id", "productId"), "product_id", _INT64),
        quantity=_as_int(_get(data, "quantity", "quantity"), "quantity", _INT32),
        price=_as_float(_get(data, "price", "price"), "price"),
    )


def _item_to_dict(item: OrderItemMessage) -> dict[str, Any]:
    return {"productId": item.product_id, "quantity": item.quantity, "price": item.price}


@dataclass
class CreateOrderRequest:
    """Request to place a new order."""

    user_id: int = 0
    items: list[OrderItemMessage] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> CreateOrderRequest:
        """Build from a JSON object; snake_case and camelCase keys are accepted."""
        data = _as_mapping(data, "CreateOrder request")
        raw_items = _get(data, "items", "items")
        if raw_items is _MISSING or raw_items is None:
            raw_items = []
        if not isinstance(raw_items, list):
            raise ValueError("field 'items' must be a list")
        return cls(
            user_id=_as_int(_get(data, "user_id", "userId"), "user_id", _INT64),
            items=[_item_from_dict(item) for item in raw_items],
        )


@dataclass
class CreateOrderResponse:
    """Result of placing an order; ``order_id`` holds the order number."""

    order_id: str = ""
    success: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form."""
        return {"orderId": self.order_id, "success": self.success}


@dataclass
class GetOrderRequest:
    """Request for the details of one order."""

    order_id: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> GetOrderRequest:
        """Build from a JSON object; snake_case and camelCase keys are accepted."""
        data = _as_mapping(data, "GetOrder request")
        return cls(order_id=_as_str(_get(data, "order_id", "orderId"), "order_id"))


@dataclass
class GetOrderResponse:
    """Details of an order; all fields empty when it was not found."""

    order_id: str = ""
    user_id: int = 0
    status: str = ""
    items: list[OrderItemMessage] = field(default_factory=list)
    total_amount: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form."""
        return {
            "orderId": self.order_id,
            "userId": self.user_id,
            "status": self.status,
            "items": [_item_to_dict(item) for item in self.items],
            "totalAmount": self.total_amount,
        }