"""Core domain objects: clients, products, payment methods and orders."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum


class PaymentMethod(IntEnum):
    """Ways an order can be paid for."""

    CASH = 1
    CARD = 2
    BLIK = 3
    PAYPAL = 4
    GIFTCARD = 5
    GOLD = 6
    TRADE = 7
    BLOOD = 8
    SOUL = 9
    PRINTER_INK = 10


@dataclass
class Client:
    """A customer of the store."""

    client_id: int
    name: str
    sname: str
    address: str
    gender: str

    def __str__(self) -> str:
        return f"{self.name} {self.sname} {self.address} {self.gender}"


@dataclass
class Product:
    """A stocked product with a unit price and a VAT rate (e.g. 0.23)."""

    pid: int
    name: str
    count: int
    price: float
    vat: float

    def order(self, cnt: int) -> int:
        """Take ``cnt`` items from stock; return how many were taken (0 if not enough)."""
        if self.count >= cnt:
            self.count -= cnt
            return cnt
        return 0


class Order:
    """A client's order: product quantities keyed by product id."""

    def __init__(self, client: Client) -> None:
        self.client = client
        self._items: dict[int, list] = {}
        self.order_time: datetime | None = None
        self.total: float = 0.0
        self.payment_method: PaymentMethod | None = None

    @property
    def products(self) -> list[tuple[Product, int]]:
        """The ordered products with their quantities, in product id order."""
        return [(product, qty) for _, (product, qty) in sorted(self._items.items())]

    def _put(self, product: Product, qty: int) -> None:
        entry = self._items.get(product.pid)
        if entry is None:
            self._items[product.pid] = [product, qty]
        else:
            entry[1] += qty

    def add(self, product: Product, count: int) -> bool:
        """Add ``count`` of ``product``, taking it from stock. False if stock is short."""
        if product.count >= count or count <= 0:
            self._put(product, product.order(count))
            return True
        return False

    def add_no_update(self, product: Product, count: int) -> bool:
        """Add ``count`` of ``product`` without touching the stock."""
        if product.count >= count or count <= 0:
            self._put(product, count)
            return True
        return False

    def modify(self, product: Product, count: int, old: int) -> bool:
        """Change the quantity of ``product`` from ``old`` to ``count``, adjusting stock."""
        if count <= 0:
            return False
        entry = self._items.get(product.pid)
        if entry is None:
            raise KeyError(f"product {product.pid} is not in this order")
        product.order(count - old)
        entry[1] = count
        return True

    def calc_total(self) -> float:
        """Recompute and return the gross total of the order."""
        self.total = sum(
            product.price * qty * (1 + product.vat) for product, qty in self._items.values()
        )
        return self.total

    def is_mine(self, client: Client) -> bool:
        """Whether this order belongs to exactly this client object."""
        return self.client is client

    def confirm(self, total: float, payment_method: int, when: datetime | None = None) -> None:
        """Finalise the order with a total, a payment method and a time (now by default)."""
        try:
            method = PaymentMethod(payment_method)
        except ValueError:
            raise ValueError(f"invalid payment method: {payment_method!r}") from None
        self.payment_method = method
        self.order_time = when if when is not None else datetime.now()
        self.total = total

    def order_time_string(self) -> str:
        """The order time in asctime form, ending with a newline."""
        if self.order_time is None:
            raise ValueError("order has no time set")
        return time.asctime(self.order_time.timetuple()) + "\n"