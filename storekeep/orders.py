"""Order book kept in a semicolon-separated file plus a packed binary copy."""

from __future__ import annotations

import struct
from datetime import datetime
from pathlib import Path
from typing import Sequence

from storekeep.models import Client, Order, Product

ORDERS_FILE = "orders.csv"
ORDERS_BINARY_FILE = "orders.bin"
PRODUCT_SEPARATOR = b"]"
END_OF_PRODUCTS = "/"

_INT = struct.Struct("<i")
_PAIR = struct.Struct("<ii")
_TRAILER = struct.Struct("<7i")


class OrderManager:
    """Holds all orders and reads/writes ``orders.csv`` and ``orders.bin``."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)
        self.path = self.directory / ORDERS_FILE
        self.binary_path = self.directory / ORDERS_BINARY_FILE
        self.orders: list[Order] = []

    def add(self, order: Order) -> Order:
        """Append an order to the book."""
        self.orders.append(order)
        return order

    def orders_of(self, client: Client) -> list[tuple[int, Order]]:
        """The orders placed by ``client``, each with its index in the book."""
        return [(index, order) for index, order in enumerate(self.orders) if order.is_mine(client)]

    def save(self) -> None:
        """Write every order to the text and binary files, replacing them."""
        for order in self.orders:
            if order.order_time is None or order.payment_method is None:
                raise ValueError("cannot save an order that has not been confirmed")

        with self.path.open("w", encoding="utf-8") as text, self.binary_path.open("wb") as binary:
            for order in self.orders:
                client_id = order.client.client_id
                fields = [str(client_id)]
                binary.write(_INT.pack(client_id))
                for product, qty in order.products:
                    fields += [str(product.pid), str(qty)]
                    binary.write(_PAIR.pack(product.pid, qty))
                binary.write(PRODUCT_SEPARATOR)

                when = order.order_time
                stamp = (
                    when.hour,
                    when.minute,
                    when.second,
                    when.day,
                    when.month - 1,
                    when.year - 1900,
                    int(order.payment_method),
                )
                fields.append(END_OF_PRODUCTS)
                fields.append(f"{order.total:g}")
                fields += [str(v) for v in stamp]
                text.write(";".join(fields) + "\n")
                binary.write(_TRAILER.pack(*stamp))

    def load(self, clients: Sequence[Client], products: Sequence[Product]) -> list[Order]:
        """Append orders from the text file, creating an empty file if it is missing.

        The client field is an index into ``clients``; product ids count from 1
        into ``products``.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self.path.write_text("", encoding="utf-8")
            return self.orders

        for line in text.splitlines():
            fields = line.split(";")
            if fields[0] == "":
                break
            order = Order(_pick(clients, int(fields[0]), "client"))
            items = iter(fields[1:])
            for pid in items:
                if pid == END_OF_PRODUCTS:
                    break
                qty = next(items, None)
                if qty is None:
                    raise ValueError(f"malformed order line: {line!r}")
                order.add_no_update(_pick(products, int(pid) - 1, "product"), int(qty))
            else:
                raise ValueError(f"malformed order line: {line!r}")

            rest = list(items)
            if len(rest) != 8:
                raise ValueError(f"malformed order line: {line!r}")
            total = float(rest[0])
            hour, minute, second, mday, mon, year, method = (int(v) for v in rest[1:])
            when = datetime(year + 1900, mon + 1, mday, hour, minute, second)
            order.confirm(total, method, when)
            self.orders.append(order)
        return self.orders


def _pick(items: Sequence, index: int, what: str):
    if not 0 <= index < len(items):
        raise IndexError(f"no {what} at index {index}")
    return items[index]