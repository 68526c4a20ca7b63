"""Order API server: wiring, request dispatch and a JSON over HTTP front end."""

from __future__ import annotations

import argparse
import json
import logging
import sqlite3
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

from ordersvc.config import Config, load_config
from ordersvc.logic import create_order, get_order
from ordersvc.messages import (
    CreateOrderRequest,
    CreateOrderResponse,
    GetOrderRequest,
    GetOrderResponse,
)
from ordersvc.repository import SqliteOrderRepository
from ordersvc.service import OrderService

_log = logging.getLogger(__name__)

_SERVICE_PREFIX = "order.Order/"


class _UnknownMethodError(LookupError):
    """The requested API method does not exist."""


@dataclass
class ServiceContext:
    """Configuration and services shared by all requests."""

    config: Config
    order_service: OrderService


def build_service_context(config: Config) -> ServiceContext:
    """Open the database named by the write data source and wire the service."""
    connection = sqlite3.connect(config.data_source.write, check_same_thread=False)
    repository = SqliteOrderRepository(connection)
    repository.create_schema()
    return ServiceContext(config=config, order_service=OrderService(repository))


class OrderServer:
    """Entry points of the order API."""

    def __init__(self, context: ServiceContext) -> None:
        self._context = context

    def create_order(self, request: CreateOrderRequest) -> CreateOrderResponse:
        """Place an order."""
        return create_order(self._context.order_service, request)

    def get_order(self, request: GetOrderRequest) -> GetOrderResponse:
        """Fetch the details of an order."""
        return get_order(self._context.order_service, request)

    def handle(self, method: str, payload: Any) -> dict[str, Any]:
        """Run the named method on a JSON payload and return the JSON reply."""
        if method == "CreateOrder":
            return self.create_order(CreateOrderRequest.from_dict(payload)).to_dict()
        if method == "GetOrder":
            return self.get_order(GetOrderRequest.from_dict(payload)).to_dict()
        raise _UnknownMethodError(f"unknown method {method!r}")


def make_http_server(server: OrderServer, host: str, port: int) -> ThreadingHTTPServer:
    """Serve the API as POST /<Method> or POST /order.Order/<Method> with JSON bodies."""
    lock = threading.Lock()

    class _Handler(BaseHTTPRequestHandler):
        def do_POST(self) -> None:  # noqa: N802
            method = self.path.split("?", 1)[0].lstrip("/")
            if method.startswith(_SERVICE_PREFIX):
                method = method[len(_SERVICE_PREFIX):]
            try:
                length = int(self.headers.get("Content-Length") or 0)
                body = self.rfile.read(length) if length > 0 else b""
                payload = json.loads(body) if body.strip() else {}
                with lock:
                    result = server.handle(method, payload)
            except LookupError as exc:
                self._reply(404, {"error": str(exc)})
            except ValueError as exc:
                self._reply(400, {"error": str(exc)})
            except Exception as exc:  # noqa: BLE001
                _log.exception("request %s failed", method)
                self._reply(500, {"error": str(exc)})
            else:
                self._reply(200, result)

        def _reply(self, status: int, body: dict[str, Any]) -> None:
            data = json.dumps(body).encode("utf-8")
            self.send_response(status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
            _log.debug(format, *args)

    return ThreadingHTTPServer((host, port), _Handler)


def _split_listen_on(listen_on: str) -> tuple[str, int]:
    host, sep, port = listen_on.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid listen address: {listen_on!r}")
    return host.strip("[]"), int(port)


def main(argv: Sequence[str] | None = None) -> None:
    """Load the configuration and serve the order API until interrupted."""
    parser = argparse.ArgumentParser(prog="ordersvc", description="Order service.")
    parser.add_argument(
        "-f", dest="config_file", default="etc/orderservice.yaml", help="the config file"
    )
    args = parser.parse_args(argv)

    config = load_config(args.config_file)
    host, port = _split_listen_on(config.listen_on)
    context = build_service_context(config)
    httpd = make_http_server(OrderServer(context), host, port)

    print(f"Starting rpc server at {config.listen_on}...")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        httpd.server_close()