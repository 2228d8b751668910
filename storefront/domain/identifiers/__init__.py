"""識別子モジュール."""
from .product_id import ProductId

__all__ = [
    "ProductId",
]
