import pytest

from ordersvc.messages import (
    CreateOrderRequest,
    CreateOrderResponse,
    GetOrderRequest,
    GetOrderResponse,
    OrderItemMessage,
)


def test_create_request_camel_case():
    request = CreateOrderRequest.from_dict(
        {"userId": 7, "items": [{"productId": 101, "quantity": 2, "price": 9.5}]}
    )
    assert request.user_id == 7
    assert request.items == [OrderItemMessage(product_id=101, quantity=2, price=9.5)]


def test_create_request_snake_case_matches_camel_case():
    camel = CreateOrderRequest.from_dict(
        {"userId": 7, "items": [{"productId": 101, "quantity": 2, "price": 9.5}]}
    )
    snake = CreateOrderRequest.from_dict(
        {"user_id": 7, "items": [{"product_id": 101, "quantity": 2, "price": 9.5}]}
    )
    assert camel == snake


def test_create_request_accepts_integer_strings():
    request = CreateOrderRequest.from_dict(
        {"userId": "7", "items": [{"productId": "101", "quantity": 1, "price": 4}]}
    )
    assert request.user_id == 7
    assert request.items[0].product_id == 101
    assert request.items[0].price == 4.0


def test_create_request_defaults():
    assert CreateOrderRequest.from_dict({}) == CreateOrderRequest()
    assert CreateOrderRequest.from_dict({"items": None}).items == []


@pytest.mark.parametrize(
    "data",
    [
        {"userId": "abc"},
        {"userId": True},
        {"userId": 2**63},
        {"items": "nope"},
        {"items": [{"quantity": 2**31}]},
        {"items": [{"price": "cheap"}]},
        {"items": [5]},
        [1, 2],
    ],
)
def test_create_request_rejects_bad_input(data):
    with pytest.raises(ValueError):
        CreateOrderRequest.from_dict(data)


def test_get_request_keys():
    assert GetOrderRequest.from_dict({"orderId": "42"}).order_id == "42"
    assert GetOrderRequest.from_dict({"order_id": "42"}).order_id == "42"
    assert GetOrderRequest.from_dict({}).order_id == ""


def test_get_request_rejects_non_string():
    with pytest.raises(ValueError):
        GetOrderRequest.from_dict({"orderId": 42})


def test_create_response_to_dict():
    response = CreateOrderResponse(order_id="SN-abc", success=True)
    assert response.to_dict() == {"orderId": "SN-abc", "success": True}


def test_empty_get_response_to_dict():
    assert GetOrderResponse().to_dict() == {
        "orderId": "",
        "userId": 0,
        "status": "",
        "items": [],
        "totalAmount": 0.0,
    }


def test_get_response_items_round_trip():
    items = [
        OrderItemMessage(product_id=101, quantity=2, price=9.5),
        OrderItemMessage(product_id=202, quantity=1, price=3.25),
    ]
    response = GetOrderResponse(
        order_id="SN-abc", user_id=7, status="0", items=items, total_amount=22.25
    )
    data = response.to_dict()
    assert data["orderId"] == "SN-abc"
    assert data["userId"] == 7
    parsed = CreateOrderRequest.from_dict({"userId": data["userId"], "items": data["items"]})
    assert parsed.items == items
    assert parsed.user_id == response.user_id