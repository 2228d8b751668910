"""ストレージ実装モジュール."""
from .file_key_value_storage import FileKeyValueStorage
from .in_memory_key_value_storage import InMemoryKeyValueStorage
from .storage_factory import create_key_value_storage

# DynamoDBKeyValueStorage は boto3 に依存するため、必要な時に
# storefront.infrastructure.storage.dynamodb_key_value_storage から直接インポートする

__all__ = [
    "FileKeyValueStorage",
    "InMemoryKeyValueStorage",
    "create_key_value_storage",
]
