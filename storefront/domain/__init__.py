"""ドメイン層モジュール."""
from .entities import Cart, Product
from .enums import Gender, LoadStatus
from .identifiers import ProductId
from .ports import (
    CatalogProvider,
    CatalogUnavailableError,
    KeyValueStorage,
    StorageError,
)
from .services import (
    CartProjection,
    CartStore,
    CartUpdatedEvent,
    CheckoutValidator,
    ProductFilter,
    ValidationResult,
)
from .value_objects import (
    CartLine,
    CartLineItem,
    CartTotals,
    CheckoutDetails,
    Money,
    Quantity,
)

__all__ = [
    # Identifiers
    "ProductId",
    # Enums
    "Gender",
    "LoadStatus",
    # Value Objects
    "CartLine",
    "CartLineItem",
    "CartTotals",
    "CheckoutDetails",
    "Money",
    "Quantity",
    # Entities
    "Cart",
    "Product",
    # Ports
    "CatalogProvider",
    "CatalogUnavailableError",
    "KeyValueStorage",
    "StorageError",
    # Services
    "CartProjection",
    "CartStore",
    "CartUpdatedEvent",
    "CheckoutValidator",
    "ProductFilter",
    "ValidationResult",
]
