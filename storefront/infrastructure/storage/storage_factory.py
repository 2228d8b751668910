"""KeyValueStorage ファクトリ."""
import logging
import os

from storefront.domain.ports import KeyValueStorage

logger = logging.getLogger(__name__)


def create_key_value_storage() -> KeyValueStorage:
    """環境変数に基づいてKeyValueStorageを生成する.

    CART_STORAGE:
        "memory"   → InMemoryKeyValueStorage（テスト用）
        "file"     → FileKeyValueStorage（CART_STORAGE_DIR 配下）
        "dynamodb" → DynamoDBKeyValueStorage（CART_TABLE_NAME）
        未設定      → CART_TABLE_NAME があれば DynamoDB、なければファイル
    """
    storage_type = os.environ.get("CART_STORAGE")
    if storage_type is None:
        storage_type = "dynamodb" if os.environ.get("CART_TABLE_NAME") else "file"

    if storage_type == "memory":
        from storefront.infrastructure.storage.in_memory_key_value_storage import (
            InMemoryKeyValueStorage,
        )

        return InMemoryKeyValueStorage()

    if storage_type == "dynamodb":
        from storefront.infrastructure.storage.dynamodb_key_value_storage import (
            DynamoDBKeyValueStorage,
        )

        return DynamoDBKeyValueStorage()

    if storage_type != "file":
        logger.warning("Unknown CART_STORAGE=%s, falling back to file storage", storage_type)

    from storefront.infrastructure.storage.file_key_value_storage import (
        FileKeyValueStorage,
    )

    return FileKeyValueStorage()
