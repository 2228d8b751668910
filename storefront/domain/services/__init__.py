"""ドメインサービスモジュール."""
from .cart_projection import CartProjection, TaxPolicy, flat_rate_tax, no_tax
from .cart_serializer import CartLoadResult, CartSerializer
from .cart_store import (
    CART_STORAGE_KEY,
    CART_UPDATED_EVENT,
    CartListener,
    CartStore,
    CartUpdatedEvent,
    CartWriteResult,
)
from .checkout_validator import CheckoutValidator, ValidationResult
from .product_filter import ProductFilter

__all__ = [
    "CART_STORAGE_KEY",
    "CART_UPDATED_EVENT",
    "CartListener",
    "CartLoadResult",
    "CartProjection",
    "CartSerializer",
    "CartStore",
    "CartUpdatedEvent",
    "CartWriteResult",
    "CheckoutValidator",
    "ProductFilter",
    "TaxPolicy",
    "ValidationResult",
    "flat_rate_tax",
    "no_tax",
]
