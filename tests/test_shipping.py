import pytest

from ordersvc.entity import (
    Address,
    Member,
    MemberLevel,
    Order,
    OrderItem,
    Region,
    ShippingPromotion,
)
from ordersvc.shipping import calculate_shipping_fee


def _order(quantity):
    return Order(items=[OrderItem(product_id="1", quantity=quantity, price=1.0)])


def _fee(quantity=1, region=Region.NORTH, level=MemberLevel.NORMAL, promo=None):
    return calculate_shipping_fee(
        _order(quantity), Member(level=level), Address(region=region), promo
    )


def test_light_order_pays_minimum_fee():
    assert _fee(quantity=1) == pytest.approx(80.0)


def test_empty_order_pays_minimum_fee():
    fee = calculate_shipping_fee(Order(), Member(), Address(), None)
    assert fee == pytest.approx(80.0)


@pytest.mark.parametrize(
    "region, surcharge",
    [
        (Region.NORTH, 0.0),
        (Region.CENTRAL, 20.0),
        (Region.SOUTH, 30.0),
        (Region.EAST, 40.0),
        (Region.ISLAND, 100.0),
    ],
)
def test_region_surcharge_is_added(region, surcharge):
    assert _fee(region=region) - _fee(region=Region.NORTH) == pytest.approx(surcharge)


@pytest.mark.parametrize(
    "level, discount",
    [
        (MemberLevel.SILVER, 0.05),
        (MemberLevel.GOLD, 0.10),
        (MemberLevel.PLATINUM, 0.15),
    ],
)
def test_member_discount_scales_fee(level, discount):
    normal = _fee(quantity=20, region=Region.SOUTH)
    discounted = _fee(quantity=20, region=Region.SOUTH, level=level)
    assert discounted == pytest.approx(normal * (1 - discount))


def test_fee_grows_linearly_above_minimum():
    assert _fee(quantity=20) == pytest.approx(2 * _fee(quantity=10))


def test_disabled_promotion_is_ignored():
    promo = ShippingPromotion(name="summer", discount=0.5, enabled=False)
    assert _fee(quantity=10, promo=promo) == _fee(quantity=10)


def test_enabled_promotion_reduces_fee():
    promo = ShippingPromotion(name="summer", discount=0.5, enabled=True)
    assert _fee(quantity=10, promo=promo) == pytest.approx(_fee(quantity=10) / 2)


def test_fee_is_clamped_at_zero():
    promo = ShippingPromotion(name="overdone", discount=1.5, enabled=True)
    assert _fee(quantity=10, promo=promo) == 0.0