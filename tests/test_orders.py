import struct
from datetime import datetime

import pytest

from storekeep.models import Client, Order, PaymentMethod, Product
from storekeep.orders import OrderManager


@pytest.fixture
def clients():
    return [
        Client(0, "Jan", "Kowalski", "Main 1", "M"),
        Client(1, "Anna", "Nowak", "Side 2", "F"),
    ]


@pytest.fixture
def products():
    return [
        Product(1, "Widget", 10, 2.5, 0.23),
        Product(2, "Gadget", 5, 4.0, 0.08),
    ]


def _confirmed(client, items, total, method, when):
    order = Order(client)
    for product, qty in items:
        order.add_no_update(product, qty)
    order.confirm(total, method, when)
    return order


def test_add_and_orders_of(clients, products):
    om = OrderManager()
    first = om.add(Order(clients[0]))
    om.add(Order(clients[1]))
    third = om.add(Order(clients[0]))
    assert om.orders_of(clients[0]) == [(0, first), (2, third)]
    assert [i for i, _ in om.orders_of(clients[1])] == [1]


def test_orders_of_uses_identity(clients):
    om = OrderManager()
    om.add(Order(clients[0]))
    twin = Client(0, "Jan", "Kowalski", "Main 1", "M")
    assert om.orders_of(twin) == []


def test_save_text_format(tmp_path, clients, products):
    om = OrderManager(tmp_path)
    when = datetime(2024, 3, 5, 14, 7, 9)
    om.add(_confirmed(clients[0], [(products[0], 2)], 10.5, 1, when))
    om.save()
    text = (tmp_path / "orders.csv").read_text(encoding="utf-8")
    assert text == "0;1;2;/;10.5;14;7;9;5;2;124;1\n"


def test_save_binary_layout(tmp_path, clients, products):
    om = OrderManager(tmp_path)
    when = datetime(2023, 11, 20, 8, 30, 15)
    om.add(_confirmed(clients[1], [(products[0], 3), (products[1], 1)], 7.0, PaymentMethod.CARD, when))
    om.save()
    data = (tmp_path / "orders.bin").read_bytes()
    assert struct.unpack_from("<i", data, 0) == (clients[1].client_id,)
    assert struct.unpack_from("<iiii", data, 4) == (1, 3, 2, 1)
    assert data[20:21] == b"]"
    trailer = struct.unpack_from("<7i", data, 21)
    assert trailer[:4] == (8, 30, 15, 20)
    assert trailer[6] == PaymentMethod.CARD
    assert len(data) == 21 + struct.calcsize("<7i")


def test_save_rejects_unconfirmed(tmp_path, clients):
    om = OrderManager(tmp_path)
    om.add(Order(clients[0]))
    with pytest.raises(ValueError):
        om.save()


def test_round_trip(tmp_path, clients, products):
    om = OrderManager(tmp_path)
    when = datetime(2022, 1, 31, 23, 59, 58)
    om.add(_confirmed(clients[1], [(products[1], 2), (products[0], 1)], 12.25, 4, when))
    om.add(_confirmed(clients[0], [], 0.0, 10, when))
    om.save()

    loaded = OrderManager(tmp_path).load(clients, products)
    assert len(loaded) == 2
    first, second = loaded
    assert first.client is clients[1]
    assert [(p.pid, q) for p, q in first.products] == [(1, 1), (2, 2)]
    assert first.total == pytest.approx(12.25)
    assert first.payment_method is PaymentMethod.PAYPAL
    assert first.order_time == when
    assert second.client is clients[0]
    assert second.products == []
    assert second.payment_method is PaymentMethod.PRINTER_INK


def test_load_does_not_touch_stock(tmp_path, clients, products):
    (tmp_path / "orders.csv").write_text("0;1;4;/;12;10;0;0;1;0;100;2\n", encoding="utf-8")
    OrderManager(tmp_path).load(clients, products)
    assert products[0].count == 10


def test_load_missing_file_creates_empty(tmp_path, clients, products):
    om = OrderManager(tmp_path)
    assert om.load(clients, products) == []
    assert (tmp_path / "orders.csv").read_text(encoding="utf-8") == ""


def test_load_stops_at_empty_line(tmp_path, clients, products):
    (tmp_path / "orders.csv").write_text(
        "0;/;1;10;0;0;1;0;100;1\n\n1;/;2;10;0;0;1;0;100;1\n", encoding="utf-8"
    )
    loaded = OrderManager(tmp_path).load(clients, products)
    assert [o.client for o in loaded] == [clients[0]]


def test_load_unknown_client(tmp_path, clients, products):
    (tmp_path / "orders.csv").write_text("5;/;1;10;0;0;1;0;100;1\n", encoding="utf-8")
    with pytest.raises(IndexError):
        OrderManager(tmp_path).load(clients, products)


def test_load_unknown_product(tmp_path, clients, products):
    (tmp_path / "orders.csv").write_text("0;9;1;/;1;10;0;0;1;0;100;1\n", encoding="utf-8")
    with pytest.raises(IndexError):
        OrderManager(tmp_path).load(clients, products)


def test_load_missing_separator(tmp_path, clients, products):
    (tmp_path / "orders.csv").write_text("0;1;1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        OrderManager(tmp_path).load(clients, products)


def test_load_bad_payment_method(tmp_path, clients, products):
    (tmp_path / "orders.csv").write_text("0;/;1;10;0;0;1;0;100;11\n", encoding="utf-8")
    with pytest.raises(ValueError):
        OrderManager(tmp_path).load(clients, products)