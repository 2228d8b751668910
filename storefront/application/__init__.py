"""アプリケーション層モジュール."""
from .use_cases import (
    AddToCartResult,
    AddToCartUseCase,
    CartBadge,
    ChangeQuantityResult,
    ChangeQuantityUseCase,
    ClearCartUseCase,
    GetCartBadgeUseCase,
    GetCartResult,
    GetCartUseCase,
    GetProductDetailUseCase,
    GetProductListUseCase,
    ProductDetailResult,
    ProductListResult,
    ProductNotFoundError,
    RemoveFromCartResult,
    RemoveFromCartUseCase,
    SubmitCheckoutResult,
    SubmitCheckoutUseCase,
)

__all__ = [
    # Product Use Cases
    "GetProductListUseCase",
    "ProductListResult",
    "GetProductDetailUseCase",
    "ProductDetailResult",
    # Cart Use Cases
    "AddToCartUseCase",
    "AddToCartResult",
    "ChangeQuantityUseCase",
    "ChangeQuantityResult",
    "GetCartUseCase",
    "GetCartResult",
    "GetCartBadgeUseCase",
    "CartBadge",
    "RemoveFromCartUseCase",
    "RemoveFromCartResult",
    "ClearCartUseCase",
    # Checkout Use Cases
    "SubmitCheckoutUseCase",
    "SubmitCheckoutResult",
    # Errors
    "ProductNotFoundError",
]
