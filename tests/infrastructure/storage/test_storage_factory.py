"""KeyValueStorage ファクトリのテスト."""
from unittest.mock import patch

from storefront.infrastructure.storage import (
    FileKeyValueStorage,
    InMemoryKeyValueStorage,
    create_key_value_storage,
)


class TestCreateKeyValueStorage:

    def test_環境変数memoryでインメモリを返す(self):
        with patch.dict("os.environ", {"CART_STORAGE": "memory"}, clear=True):
            assert isinstance(create_key_value_storage(), InMemoryKeyValueStorage)

    def test_環境変数fileでファイルを返す(self, tmp_path):
        with patch.dict("os.environ", {"CART_STORAGE": "file", "CART_STORAGE_DIR": str(tmp_path)}, clear=True):
            storage = create_key_value_storage()
        assert isinstance(storage, FileKeyValueStorage)
        assert storage.directory == tmp_path

    def test_環境変数dynamodbでDynamoDBを返す(self):
        with patch.dict("os.environ", {"CART_STORAGE": "dynamodb"}, clear=True):
            with patch("boto3.resource"):
                from storefront.infrastructure.storage.dynamodb_key_value_storage import (
                    DynamoDBKeyValueStorage,
                )

                assert isinstance(create_key_value_storage(), DynamoDBKeyValueStorage)

    def test_未設定でテーブル名があればDynamoDB(self):
        with patch.dict("os.environ", {"CART_TABLE_NAME": "cart"}, clear=True):
            with patch("boto3.resource"):
                from storefront.infrastructure.storage.dynamodb_key_value_storage import (
                    DynamoDBKeyValueStorage,
                )

                assert isinstance(create_key_value_storage(), DynamoDBKeyValueStorage)

    def test_未設定ならファイル(self):
        with patch.dict("os.environ", {}, clear=True):
            assert isinstance(create_key_value_storage(), FileKeyValueStorage)

    def test_不明な値ならファイルにフォールバック(self):
        with patch.dict("os.environ", {"CART_STORAGE": "redis"}, clear=True):
            assert isinstance(create_key_value_storage(), FileKeyValueStorage)
