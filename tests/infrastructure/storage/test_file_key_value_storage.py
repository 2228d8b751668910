"""FileKeyValueStorageのテスト."""
from unittest.mock import patch

import pytest

from storefront.domain.ports import StorageError
from storefront.domain.services import CartStore
from storefront.infrastructure.storage import FileKeyValueStorage


class TestFileKeyValueStorage:
    """FileKeyValueStorageのテスト."""

    def test_保存と取得(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path / "origin")
        storage.set("rainydays_cart_v1", b'[{"id": "A", "qty": 1}]')
        assert storage.get("rainydays_cart_v1") == b'[{"id": "A", "qty": 1}]'
        assert (tmp_path / "origin" / "rainydays_cart_v1").exists()

    def test_存在しないキーはNone(self, tmp_path):
        assert FileKeyValueStorage(tmp_path).get("rainydays_cart_v1") is None

    def test_一時ファイルが残らない(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path)
        storage.set("cart", b"1")
        storage.set("cart", b"2")
        assert [p.name for p in tmp_path.iterdir()] == ["cart"]

    def test_不正なキーはStorageError(self, tmp_path):
        with pytest.raises(StorageError, match="invalid storage key"):
            FileKeyValueStorage(tmp_path).get("../escape")

    def test_読み込みエラーはStorageError(self, tmp_path):
        (tmp_path / "cart").mkdir()
        with pytest.raises(StorageError):
            FileKeyValueStorage(tmp_path).get("cart")

    def test_書き込みエラーはStorageError(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path)
        with patch("storefront.infrastructure.storage.file_key_value_storage.os.replace") as mock_replace:
            mock_replace.side_effect = PermissionError("read-only")
            with pytest.raises(StorageError, match="read-only"):
                storage.set("cart", b"1")
        assert list(tmp_path.iterdir()) == []

    def test_環境変数でディレクトリを指定(self, tmp_path):
        with patch.dict("os.environ", {"CART_STORAGE_DIR": str(tmp_path / "env")}):
            storage = FileKeyValueStorage()
        assert storage.directory == tmp_path / "env"

    def test_再起動後もカートが残る(self, tmp_path):
        """別インスタンスのストアから同じカートが読めることを確認."""
        CartStore(FileKeyValueStorage(tmp_path)).add_line("A", 2)
        assert CartStore(FileKeyValueStorage(tmp_path)).total_quantity() == 2
