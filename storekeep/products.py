"""Product catalogue kept in a semicolon-separated file."""

from __future__ import annotations

from pathlib import Path

from storekeep.models import Product

PRODUCTS_FILE = "products.csv"


def _fmt(value: float) -> str:
    return f"{value:g}"


class ProductManager:
    """Holds the product list and reads/writes ``products.csv``."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.path = Path(directory) / PRODUCTS_FILE
        self.products: list[Product] = []

    def load(self) -> list[Product]:
        """Append products from the file; a missing file adds nothing."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return self.products
        for line in text.splitlines():
            fields = line.split(";", 4)
            if fields[0] == "":
                break
            if len(fields) != 5:
                raise ValueError(f"malformed product line: {line!r}")
            pid, name, count, price, vat = fields
            self.products.append(Product(int(pid), name, int(count), float(price), float(vat)))
        return self.products

    def save(self) -> None:
        """Write all products to the file, replacing its contents."""
        with self.path.open("w", encoding="utf-8") as out:
            for p in self.products:
                out.write(f"{p.pid};{p.name};{p.count};{_fmt(p.price)};{_fmt(p.vat)}\n")