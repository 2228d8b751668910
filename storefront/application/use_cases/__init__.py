"""ユースケースモジュール."""
from .add_to_cart import AddToCartResult, AddToCartUseCase
from .change_quantity import ChangeQuantityResult, ChangeQuantityUseCase
from .clear_cart import ClearCartUseCase
from .get_cart import GetCartResult, GetCartUseCase
from .get_cart_badge import CartBadge, GetCartBadgeUseCase
from .get_product_detail import (
    GetProductDetailUseCase,
    ProductDetailResult,
    ProductNotFoundError,
)
from .get_product_list import GetProductListUseCase, ProductListResult
from .remove_from_cart import RemoveFromCartResult, RemoveFromCartUseCase
from .submit_checkout import SubmitCheckoutResult, SubmitCheckoutUseCase

__all__ = [
    "AddToCartResult",
    "AddToCartUseCase",
    "CartBadge",
    "ChangeQuantityResult",
    "ChangeQuantityUseCase",
    "ClearCartUseCase",
    "GetCartBadgeUseCase",
    "GetCartResult",
    "GetCartUseCase",
    "GetProductDetailUseCase",
    "GetProductListUseCase",
    "ProductDetailResult",
    "ProductListResult",
    "ProductNotFoundError",
    "RemoveFromCartResult",
    "RemoveFromCartUseCase",
    "SubmitCheckoutResult",
    "SubmitCheckoutUseCase",
]
