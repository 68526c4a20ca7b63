# ordersvc

An order service. It keeps orders and their items in an SQLite database,
computes order totals and shipping fees, and answers order requests as
JSON over HTTP.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
ordersvc -f etc/orderservice.yaml
```

`-f` names the configuration file and defaults to `etc/orderservice.yaml`.
The server prints `Starting rpc server at <ListenOn>...` and serves until
interrupted.

### Configuration

The file is YAML, read by `ordersvc.config.load_config(path)`, which
returns a `Config` with its database settings in a `DataSourceConfig`.
Field names are matched without regard to case.

```yaml
Name: order.rpc
ListenOn: 127.0.0.1:8080
Mode: dev
DataSource:
  Read: orders.db
  Write: orders.db
MigrationPath: migrations
Cache:
  - Host: localhost:6379
```

- `Name`, `ListenOn`, `DataSource` (with `Read` and `Write`) and
  `MigrationPath` are required; a missing one raises `ValueError`.
- `Mode` defaults to `pro`.
- `Cache` is optional and must be a list of mappings.
- `ListenOn` must be `host:port`.

The SQLite database is opened at the path given by `DataSource.Write`, and
its tables are created if they do not exist.

### HTTP API

Every call is a `POST` with a JSON body, to `/<Method>` or
`/order.Order/<Method>`. Replies are JSON.

`CreateOrder`:

```json
{"userId": 7, "items": [{"productId": 1001, "quantity": 2, "price": 9.5}]}
```

answers `{"orderId": "SN-…", "success": true}`, where `orderId` is the new
order's serial number.

`GetOrder` takes the order's numeric database id as a string:

```json
{"orderId": "1"}
```

and answers with `orderId` (the serial number), `userId`, `status` (the
status number as a string), `items` and `totalAmount`. An unknown id gives
a reply with all fields empty.

Request keys may be written in camelCase or snake_case. An unknown method
answers 404, a malformed body or field answers 400, and any other failure
answers 500; each with `{"error": "…"}`.

## Using it as a library

### Orders

`ordersvc.entity` holds the domain model: `Order`, `OrderItem`, `Member`,
`Address` and `ShippingPromotion`, and the enumerations `OrderStatus`,
`MemberLevel` and `Region`.

- `Order.calculate_total_amount()` sets the order's total to the sum of
  price × quantity over its items, and returns it.
- `Order.can_cancel()` is true only while the order is pending payment.

Order statuses are: pending payment (0), paid (1), shipped (2),
completed (3) and cancelled (4).

### Shipping fees

`ordersvc.shipping.calculate_shipping_fee(order, member, address, promo)`
works out the fee for an order:

1. Each item unit weighs 0.5 kg; the base fee is 60 per kg, never below 80.
2. A regional surcharge is added: north 0, central 20, south 30, east 40,
   islands 100.
3. A member discount applies: normal 0 %, silver 5 %, gold 10 %,
   platinum 15 %.
4. An enabled promotion takes off its own discount fraction; pass `None`
   for no promotion.

The fee is never below zero.

### Storage

`ordersvc.repository.SqliteOrderRepository` wraps an open `sqlite3`
connection and implements the abstract `OrderRepository`:

```python
import sqlite3
from ordersvc.repository import SqliteOrderRepository

repo = SqliteOrderRepository(sqlite3.connect(":memory:"))
repo.create_schema()
```

`create_order` writes an order and all its items in one transaction and
fills in the new order id on the order and its items.
`find_order_by_id` and `find_order_by_order_sn` return the whole order,
or `None` when nothing matches. `update_order_status` changes an order's
status and raises when the order does not exist. Storage failures raise
`RepositoryError`.

### Application service

`ordersvc.service.OrderService` sits on top of a repository:

- `create_order(user_id, items)` gives the order a fresh `SN-<uuid>`
  serial number, status pending payment and its computed total, and
  stores it.
- `get_order_detail(order_id)` returns the order or `None`.
- `cancel_order(order_id)` sets the order to cancelled; it raises
  `OrderServiceError` when the order does not exist or is no longer
  pending payment.

### Requests and responses

`ordersvc.messages` defines `CreateOrderRequest`, `CreateOrderResponse`,
`GetOrderRequest`, `GetOrderResponse` and `OrderItemMessage`. Requests are
built with `from_dict`, responses turned into JSON objects with `to_dict`.
`ordersvc.logic.create_order(service, request)` and
`ordersvc.logic.get_order(service, request)` translate between these
messages and the service.

### Server

`ordersvc.server.build_service_context(config)` opens the database and
wires the repository and service into a `ServiceContext`. `OrderServer`
answers requests through `create_order`, `get_order`, or
`handle(method, payload)`, and `make_http_server(server, host, port)`
returns a `ThreadingHTTPServer` that serves it.

## What it does not do

- The API speaks JSON over plain HTTP only; there is no gRPC endpoint and
  no service reflection.
- Storage is SQLite only. `DataSource.Read`, `MigrationPath`, `Mode` and
  `Cache` are read from the configuration but not used: there is no
  separate read database, no migration runner and no cache.
- Cancelling orders and shipping fees are available in the library but
  not over the HTTP API.