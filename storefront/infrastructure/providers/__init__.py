"""プロバイダー実装モジュール."""
from .catalog_provider_factory import create_catalog_provider
from .mock_catalog_provider import MockCatalogProvider

__all__ = [
    "MockCatalogProvider",
    "create_catalog_provider",
]
