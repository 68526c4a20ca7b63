"""Persistence of order aggregates."""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from ordersvc.entity import Order, OrderItem, OrderStatus

_SCHEMA = """
CREATE TABLE IF NOT EXISTS orders (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    order_sn TEXT NOT NULL UNIQUE,
    user_id INTEGER NOT NULL,
    total_amount REAL NOT NULL DEFAULT 0,
    status INTEGER NOT NULL DEFAULT 0,
    create_time TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
    update_time TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS order_items (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    order_id INTEGER NOT NULL,
    product_id TEXT NOT NULL,
    quantity INTEGER NOT NULL,
    price REAL NOT NULL,
    create_time TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
    update_time TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
CREATE INDEX IF NOT EXISTS idx_order_items_order_id ON order_items (order_id);
"""

_ORDER_COLUMNS = "id, order_sn, user_id, total_amount, status, create_time, update_time"
_ITEM_COLUMNS = "id, order_id, product_id, quantity, price, create_time, update_time"


class RepositoryError(Exception):
    """A storage operation failed."""


class OrderRepository(ABC):
    """Storage operations for order aggregates."""

    @abstractmethod
    def create_order(self, order: Order) -> None:
        """Store an order with its items atomically and assign its id."""

    @abstractmethod
    def update_order_status(self, order_id: int, status: OrderStatus) -> None:
        """Change the status of an existing order."""

    @abstractmethod
    def find_order_by_id(self, order_id: int) -> Order | None:
        """Return the full order, or None if there is none with that id."""

    @abstractmethod
    def find_order_by_order_sn(self, order_sn: str) -> Order | None:
        """Return the full order, or None if there is none with that number."""


def _parse_time(value: str | None) -> datetime | None:
    if value is None:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class SqliteOrderRepository(OrderRepository):
    """Order repository backed by an SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection

    def create_schema(self) -> None:
        """Create the tables if they do not exist yet."""
        self._conn.executescript(_SCHEMA)

    def create_order(self, order: Order) -> None:
        with self._conn:
            try:
                cursor = self._conn.execute(
                    "INSERT INTO orders (order_sn, user_id, total_amount, status) "
                    "VALUES (?, ?, ?, ?)",
                    (order.order_sn, order.user_id, order.total_amount, int(order.status)),
                )
            except sqlite3.Error as exc:
                raise RepositoryError(
                    f"repository: CreateOrder failed during order insert: {exc}"
                ) from exc

            new_id = cursor.lastrowid
            if new_id is None:
                raise RepositoryError(
                    "repository: CreateOrder failed during get last insert id"
                )
            order.id = new_id
            for item in order.items:
                item.order_id = new_id

            if order.items:
                try:
                    self._insert_items(order.items)
                except sqlite3.Error as exc:
                    raise RepositoryError(
                        f"repository: CreateOrder failed during items batch insert: {exc}"
                    ) from exc

    def _insert_items(self, items: list[OrderItem]) -> None:
        placeholders = ",".join("(?, ?, ?, ?)" for _ in items)
        args = [
            value
            for item in items
            for value in (item.order_id, item.product_id, item.quantity, item.price)
        ]
        self._conn.execute(
            "INSERT INTO order_items (order_id, product_id, quantity, price) VALUES "
            + placeholders,
            args,
        )

    def update_order_status(self, order_id: int, status: OrderStatus) -> None:
        try:
            row = self._find_order_row("id", order_id)
        except sqlite3.Error as exc:
            raise RepositoryError(f"UpdateOrderStatus find order failed: {exc}") from exc
        if row is None:
            raise RepositoryError("UpdateOrderStatus find order failed: not found")
        try:
            with self._conn:
                self._conn.execute(
                    "UPDATE orders SET status = ?, update_time = CURRENT_TIMESTAMP "
                    "WHERE id = ?",
                    (int(status), order_id),
                )
        except sqlite3.Error as exc:
            raise RepositoryError(f"UpdateOrderStatus update failed: {exc}") from exc

    def find_order_by_id(self, order_id: int) -> Order | None:
        return self._find_order("id", order_id, "FindOrderByID")

    def find_order_by_order_sn(self, order_sn: str) -> Order | None:
        return self._find_order("order_sn", order_sn, "FindOrderByOrderSN")

    def _find_order_row(self, column: str, value: object) -> tuple | None:
        return self._conn.execute(
            f"SELECT {_ORDER_COLUMNS} FROM orders WHERE {column} = ? LIMIT 1",
            (value,),
        ).fetchone()

    def _find_order(self, column: str, value: object, operation: str) -> Order | None:
        try:
            row = self._find_order_row(column, value)
        except sqlite3.Error as exc:
            raise RepositoryError(
                f"repository: {operation} find order failed: {exc}"
            ) from exc
        if row is None:
            return None

        try:
            item_rows = self._conn.execute(
                f"SELECT {_ITEM_COLUMNS} FROM order_items WHERE order_id = ? ORDER BY id",
                (row[0],),
            ).fetchall()
        except sqlite3.Error as exc:
            raise RepositoryError(
                f"repository: {operation} find items failed: {exc}"
            ) from exc
        return self._to_entity(row, item_rows)

    @staticmethod
    def _to_entity(row: tuple, item_rows: list[tuple]) -> Order:
        items = [
            OrderItem(
                id=item_id,
                order_id=owner,
                product_id=product_id,
                quantity=quantity,
                price=price,
                create_time=_parse_time(created),
                update_time=_parse_time(updated),
            )
            for item_id, owner, product_id, quantity, price, created, updated in item_rows
        ]
        order_id, order_sn, user_id, total, status, created, updated = row
        return Order(
            id=order_id,
            order_sn=order_sn,
            user_id=user_id,
            total_amount=total,
            status=OrderStatus(status),
            items=items,
            create_time=_parse_time(created),
            update_time=_parse_time(updated),
        )