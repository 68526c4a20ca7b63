"""Shipping fee calculation."""

from __future__ import annotations

from ordersvc.entity import (
    Address,
    Member,
    MemberLevel,
    Order,
    Region,
    ShippingPromotion,
)

_KG_PER_ITEM = 0.5
_FEE_PER_KG = 60.0
_MIN_BASE_FEE = 80.0

_REGION_SURCHARGE = {
    Region.NORTH: 0.0,
    Region.CENTRAL: 20.0,
    Region.SOUTH: 30.0,
    Region.EAST: 40.0,
    Region.ISLAND: 100.0,
}

_MEMBER_DISCOUNT = {
    MemberLevel.NORMAL: 0.0,
    MemberLevel.SILVER: 0.05,
    MemberLevel.GOLD: 0.10,
    MemberLevel.PLATINUM: 0.15,
}


def calculate_shipping_fee(
    order: Order,
    member: Member,
    address: Address,
    promo: ShippingPromotion | None = None,
) -> float:
    """Return the shipping fee for an order.

    The fee is weight based with a minimum, plus a regional surcharge, then
    reduced by the member discount and by an enabled promotion. It never
    drops below zero.
    """
    total_weight = sum(
        (float(item.quantity) * _KG_PER_ITEM for item in order.items), 0.0
    )
    base_fee = max(total_weight * _FEE_PER_KG, _MIN_BASE_FEE)

    region_fee = _REGION_SURCHARGE.get(address.region, 0.0)
    member_discount = _MEMBER_DISCOUNT.get(member.level, 0.0)
    promo_discount = promo.discount if promo is not None and promo.enabled else 0.0

    fee = (base_fee + region_fee) * (1 - member_discount) * (1 - promo_discount)
    return max(fee, 0.0)