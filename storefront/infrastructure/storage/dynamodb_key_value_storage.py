"""キーバリューストレージのDynamoDB実装."""
import os
from datetime import datetime, timedelta, timezone

import boto3
from boto3.dynamodb.types import Binary
from botocore.exceptions import BotoCoreError, ClientError

from storefront.domain.ports import KeyValueStorage, StorageError

# TTL: 30日
TTL_DAYS = 30


class DynamoDBKeyValueStorage(KeyValueStorage):
    """キーバリューストレージのDynamoDB実装.

    パーティションキー storage_key にオリジン（スコープ）とキーを連結して保存する。
    """

    def __init__(self, table_name: str | None = None, scope: str | None = None) -> None:
        """初期化.

        Args:
            table_name: テーブル名（省略時は CART_TABLE_NAME）
            scope: オリジン相当のスコープ（省略時は CART_STORAGE_SCOPE）
        """
        self._table_name = table_name or os.environ.get(
            "CART_TABLE_NAME", "rainydays-cart"
        )
        self._scope = scope or os.environ.get("CART_STORAGE_SCOPE", "default")
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def get(self, key: str) -> bytes | None:
        """値を取得する."""
        try:
            response = self._table.get_item(Key={"storage_key": self._storage_key(key)})
        except (BotoCoreError, ClientError) as e:
            raise StorageError(key, str(e)) from e
        item = response.get("Item")
        if item is None:
            return None
        return self._to_bytes(item.get("value"))

    def set(self, key: str, value: bytes) -> None:
        """値を保存する."""
        ttl = int((datetime.now(timezone.utc) + timedelta(days=TTL_DAYS)).timestamp())
        try:
            self._table.put_item(
                Item={
                    "storage_key": self._storage_key(key),
                    "value": Binary(value),
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                    "ttl": ttl,
                }
            )
        except (BotoCoreError, ClientError) as e:
            raise StorageError(key, str(e)) from e

    def _storage_key(self, key: str) -> str:
        return f"{self._scope}#{key}"

    @staticmethod
    def _to_bytes(value: object) -> bytes | None:
        """DynamoDBのBinaryをbytesに変換."""
        if value is None:
            return None
        if isinstance(value, Binary):
            return value.value
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        if isinstance(value, str):
            return value.encode("utf-8")
        return None
