"""Keep clients, products and orders for a small shop in plain text files."""

__version__ = "0.1.0"
__all__ = ["__version__"]