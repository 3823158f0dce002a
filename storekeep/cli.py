"""Interactive store console: clients, products and orders."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import TextIO

from storekeep.clients import ClientManager
from storekeep.models import Client, Order
from storekeep.orders import OrderManager
from storekeep.products import ProductManager

MENU = (
    "1. Add client\n2. Modify client\n3. Change client\n4. Add order\n"
    "5. Change order\n6. View products\n7. View orders\n8. Save\n9. Exit"
)
PAYMENT_MENU = "Select payment method: \n1. Cash\n2. Card\n3. Blik\n4. Paypal\n5. Giftcard"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_WORD = re.compile(r"\S+")


def _g(value: float) -> str:
    return f"{value:g}"


class _Console:
    """Reads words, lines and numbers from a stream the way a terminal user types them."""

    def __init__(self, infile: TextIO, outfile: TextIO) -> None:
        self._in = infile
        self._out = outfile
        self._buf = ""

    def say(self, text: str = "") -> None:
        print(text, file=self._out)

    def prompt(self, text: str) -> None:
        self._out.write(text)

    def _fill(self) -> None:
        line = self._in.readline()
        if not line:
            raise EOFError
        self._buf = line

    def word(self) -> str:
        while not self._buf.strip():
            self._fill()
        rest = self._buf.lstrip()
        token = _WORD.match(rest).group()
        self._buf = rest[len(token):]
        return token

    def ignore(self) -> None:
        if not self._buf:
            self._fill()
        self._buf = self._buf[1:]

    def line(self) -> str:
        if not self._buf:
            self._fill()
        text = self._buf.partition("\n")[0]
        self._buf = ""
        return text

    def number(self) -> int:
        while True:
            token = self.word()
            try:
                return int(token)
            except ValueError:
                self.say("Please enter a number.")


def _ask_person(con: _Console, gender_as_line: bool) -> tuple[str, str, str, str]:
    con.say("Podaj imie: ")
    name = con.word()
    con.say("Podaj nazwisko: ")
    sname = con.word()
    con.say("Podaj adres: ")
    con.ignore()
    address = con.line()
    con.say("Podaj plec (M/F): ")
    gender = con.line() if gender_as_line else con.word()
    return name, sname, address, gender


def _switch_client(con: _Console, cm: ClientManager) -> Client:
    for i, client in enumerate(cm.clients, start=1):
        con.say(f"{i}{client}")
    con.prompt("Wybierz klienta: ")
    while True:
        pick = con.number()
        if 0 < pick <= len(cm.clients):
            return cm.clients[pick - 1]


def _confirm(con: _Console, order: Order) -> None:
    con.say(PAYMENT_MENU)
    while True:
        pick = con.number()
        if 0 < pick < 11:
            break
        con.say("Invalid payment method")
    order.confirm(order.calc_total(), pick)


def _add_order(con: _Console, client: Client, pm: ProductManager, om: OrderManager) -> None:
    order = Order(client)
    products = pm.products
    while True:
        for p in products:
            con.say(
                f"{p.pid}. {p.name} Count: {p.count} Price: ${_g(p.price)} VAT: {_g(p.vat * 100)}%"
            )
        con.say("Pick a number from the list or 0 to confirm order: ")
        pick = con.number()
        if 0 < pick <= len(products):
            product = products[pick - 1]
            con.say("How much would you like to order? 0 to cancel")
            while True:
                count = con.number()
                if count == 0:
                    break
                if product.count > count:
                    order.add(product, count)
                    con.say("Order updated successfully.")
                    break
                con.say("Not enough products to order.")
        elif pick == 0:
            _confirm(con, order)
            om.add(order)
            return
        else:
            con.say("Wrong pick")


def _modify(con: _Console, order: Order) -> None:
    while True:
        items = order.products
        con.say("Products: ")
        for i, (product, qty) in enumerate(items, start=1):
            con.say(f"{i}. Name: {product.name}")
            con.say(f" Count: {qty}")
        con.say("Pick a product: (0 to cancel)")
        pick = con.number()
        if pick == 0:
            return
        if 0 < pick <= len(items):
            product, qty = items[pick - 1]
            con.say("Input new amount: (0 to delete product)")
            order.modify(product, con.number(), qty)
        else:
            con.say("Invalid pick")


def _modify_order(con: _Console, client: Client, om: OrderManager) -> None:
    mine = om.orders_of(client)
    while True:
        con.say("Pick order ID (0 to cancel): ")
        for i, (index, _) in enumerate(mine, start=1):
            con.say(f"{i}. Order #{index}")
        pick = con.number()
        if 0 < pick <= len(mine):
            _modify(con, mine[pick - 1][1])
            return
        if pick == 0:
            return
        con.say("Invalid pick")


def _view_orders(con: _Console, om: OrderManager) -> None:
    for i, order in enumerate(om.orders, start=1):
        method = int(order.payment_method) if order.payment_method is not None else 0
        stamp = order.order_time_string() if order.order_time is not None else "\n"
        con.say(
            f"Order ID: {i} Client ID: {order.client.client_id} Products: [Expand] "
            f"Total: {_g(order.total)} Order time: {stamp} Payment Method ID: {method}"
        )
    while True:
        con.say("Input order ID to expand product list or 0 to cancel.")
        pick = con.number()
        if pick == 0:
            return
        if pick < 0 or pick > len(om.orders):
            con.say("Invalid order ID.")
            continue
        for product, qty in om.orders[pick - 1].products:
            con.say(f"{product.name} Amount: {qty}")


def _save_all(cm: ClientManager, om: OrderManager, pm: ProductManager) -> None:
    cm.save()
    om.save()
    pm.save()


def run(directory: str | Path, infile: TextIO, outfile: TextIO) -> int:
    """Run the store console against the data files in ``directory``."""
    con = _Console(infile, outfile)
    cm = ClientManager(directory)
    pm = ProductManager(directory)
    om = OrderManager(directory)
    try:
        pm.load()
        try:
            cm.load()
        except FileNotFoundError:
            cm.create_first(*_ask_person(con, gender_as_line=False))
        om.load(cm.clients, pm.products)
        if not cm.clients:
            con.say("No clients available.")
            return 1
        current = cm.clients[0]

        while True:
            con.say(
                f"Logged in as: {current.name} {current.sname} {current.address} {current.gender}"
            )
            con.say(MENU)
            match = _LEADING_INT.match(con.line())
            pick = int(match.group(1)) if match else 0
            if pick == 1:
                try:
                    cm.add(*_ask_person(con, gender_as_line=True))
                except ValueError as exc:
                    con.say(str(exc))
            elif pick == 2:
                try:
                    cm.modify(current, *_ask_person(con, gender_as_line=False))
                except ValueError as exc:
                    con.say(str(exc))
            elif pick == 3:
                current = _switch_client(con, cm)
            elif pick == 4:
                _add_order(con, current, pm, om)
            elif pick == 5:
                _modify_order(con, current, om)
            elif pick == 6:
                for p in pm.products:
                    con.say(
                        f"PID: {p.pid} Name: {p.name} Price:{_g(p.price)} "
                        f"Quantity: {p.count} VAT: {_g(p.vat * 100)}%"
                    )
            elif pick == 7:
                _view_orders(con, om)
            elif pick == 8:
                _save_all(cm, om, pm)
            elif pick == 9:
                _save_all(cm, om, pm)
                return 0
    except EOFError:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="storekeep", description="Interactive store console.")
    parser.add_argument(
        "-d", "--directory", default=".", help="directory holding the data files"
    )
    args = parser.parse_args(argv)
    return run(args.directory, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())