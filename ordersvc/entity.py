"""Domain entities of the order service."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


class Region(IntEnum):
    """Delivery region of an address."""

    NORTH = 0
    CENTRAL = 1
    SOUTH = 2
    EAST = 3
    ISLAND = 4


class MemberLevel(IntEnum):
    """Membership tier of a customer."""

    NORMAL = 0
    SILVER = 1
    GOLD = 2
    PLATINUM = 3


class OrderStatus(IntEnum):
    """Lifecycle state of an order."""

    PENDING_PAYMENT = 0
    PAID = 1
    SHIPPED = 2
    COMPLETED = 3
    CANCELLED = 4


@dataclass
class Address:
    """A delivery address."""

    id: int = 0
    recipient: str = ""
    region: Region = Region.NORTH
    detail: str = ""


@dataclass
class Member:
    """A customer account."""

    id: int = 0
    name: str = ""
    level: MemberLevel = MemberLevel.NORMAL


@dataclass
class ShippingPromotion:
    """A shipping campaign; ``discount`` of 0.1 means 10% off."""

    name: str = ""
    discount: float = 0.0
    enabled: bool = False


@dataclass
class OrderItem:
    """One line of an order."""

    id: int = 0
    order_id: int = 0
    product_id: str = ""
    quantity: int = 0
    price: float = 0.0
    create_time: datetime | None = None
    update_time: datetime | None = None


@dataclass
class Order:
    """Aggregate root of an order and its items."""

    id: int = 0
    order_sn: str = ""
    user_id: int = 0
    total_amount: float = 0.0
    status: OrderStatus = OrderStatus.PENDING_PAYMENT
    items: list[OrderItem] = field(default_factory=list)
    create_time: datetime | None = None
    update_time: datetime | None = None

    def calculate_total_amount(self) -> float:
        """Set and return the sum of price times quantity over all items."""
        self.total_amount = sum(
            (item.price * float(item.quantity) for item in self.items), 0.0
        )
        return self.total_amount

    def can_cancel(self) -> bool:
        """Only orders still awaiting payment may be cancelled."""
        return self.status == OrderStatus.PENDING_PAYMENT