"""ポートモジュール."""
from .catalog_provider import CatalogProvider, CatalogUnavailableError
from .key_value_storage import KeyValueStorage, StorageError

__all__ = [
    "CatalogProvider",
    "CatalogUnavailableError",
    "KeyValueStorage",
    "StorageError",
]
