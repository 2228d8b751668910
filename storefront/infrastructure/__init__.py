"""インフラストラクチャ層モジュール."""
# NoroffCatalogProvider は requests、DynamoDBKeyValueStorage は boto3 に依存するため、
# 必要な時に各モジュールから直接インポートする
from .providers import MockCatalogProvider, create_catalog_provider
from .storage import FileKeyValueStorage, InMemoryKeyValueStorage, create_key_value_storage

__all__ = [
    "FileKeyValueStorage",
    "InMemoryKeyValueStorage",
    "MockCatalogProvider",
    "create_catalog_provider",
    "create_key_value_storage",
]
