import sqlite3

import pytest

from ordersvc.entity import OrderItem, OrderStatus
from ordersvc.logic import create_order, get_order
from ordersvc.messages import (
    CreateOrderRequest,
    GetOrderRequest,
    GetOrderResponse,
    OrderItemMessage,
)
from ordersvc.repository import SqliteOrderRepository
from ordersvc.service import OrderService


@pytest.fixture
def repository():
    connection = sqlite3.connect(":memory:")
    repo = SqliteOrderRepository(connection)
    repo.create_schema()
    yield repo
    connection.close()


@pytest.fixture
def service(repository):
    return OrderService(repository)


def _request():
    return CreateOrderRequest(
        user_id=7,
        items=[
            OrderItemMessage(product_id=101, quantity=2, price=12.5),
            OrderItemMessage(product_id=202, quantity=1, price=3.0),
        ],
    )


def test_create_order_returns_order_number(service, repository):
    response = create_order(service, _request())
    assert response.success is True
    assert response.order_id.startswith("SN-")
    stored = repository.find_order_by_order_sn(response.order_id)
    assert stored.user_id == 7
    assert [item.product_id for item in stored.items] == ["101", "202"]
    assert [item.quantity for item in stored.items] == [2, 1]


def test_get_order_round_trip(service, repository):
    request = _request()
    created = create_order(service, request)
    stored = repository.find_order_by_order_sn(created.order_id)

    response = get_order(service, GetOrderRequest(order_id=str(stored.id)))
    assert response.order_id == created.order_id
    assert response.user_id == request.user_id
    assert response.items == request.items
    assert response.status == str(int(OrderStatus.PENDING_PAYMENT))
    assert response.total_amount == pytest.approx(stored.total_amount)


def test_get_order_reports_cancelled_status(service, repository):
    created = create_order(service, _request())
    stored = repository.find_order_by_order_sn(created.order_id)
    service.cancel_order(stored.id)
    response = get_order(service, GetOrderRequest(order_id=str(stored.id)))
    assert response.status == str(int(OrderStatus.CANCELLED))


def test_get_missing_order_is_empty(service):
    assert get_order(service, GetOrderRequest(order_id="999")) == GetOrderResponse()


@pytest.mark.parametrize("order_id", ["abc", "", "1.5", " 1", "1_0", str(2**63)])
def test_get_order_rejects_bad_id(service, order_id):
    with pytest.raises(ValueError):
        get_order(service, GetOrderRequest(order_id=order_id))


def test_get_order_rejects_non_numeric_product(service):
    order = service.create_order(1, [OrderItem(product_id="widget", quantity=1, price=1.0)])
    with pytest.raises(ValueError):
        get_order(service, GetOrderRequest(order_id=str(order.id)))


def test_create_order_without_items(service):
    response = create_order(service, CreateOrderRequest(user_id=3))
    assert response.success is True
    order = service.get_order_detail(1)
    assert order.order_sn == response.order_id
    assert order.items == []