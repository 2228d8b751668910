"""エンティティモジュール."""
from .cart import Cart
from .product import Product

__all__ = [
    "Cart",
    "Product",
]
