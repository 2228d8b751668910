"""pytest configuration for storefront tests.

全テストで共通のインメモリストレージとサンプル商品を提供する。
"""
from decimal import Decimal

import pytest

from storefront.dependencies import Dependencies
from storefront.domain.entities import Product
from storefront.domain.enums import Gender
from storefront.domain.ports import (
    CatalogProvider,
    CatalogUnavailableError,
    KeyValueStorage,
    StorageError,
)
from storefront.domain.services import CartStore
from storefront.domain.value_objects import Money
from storefront.infrastructure.storage import InMemoryKeyValueStorage


class UnavailableStorage(KeyValueStorage):
    """常に利用不可を返すストレージ（容量超過・無効化の再現用）."""

    def __init__(self, fail_get: bool = True, fail_set: bool = True) -> None:
        self.fail_get = fail_get
        self.fail_set = fail_set
        self._values: dict[str, bytes] = {}

    def get(self, key: str) -> bytes | None:
        if self.fail_get:
            raise StorageError(key, "storage disabled")
        return self._values.get(key)

    def set(self, key: str, value: bytes) -> None:
        if self.fail_set:
            raise StorageError(key, "quota exceeded")
        self._values[key] = value


class FailingCatalogProvider(CatalogProvider):
    """常に取得に失敗するカタログ."""

    def fetch_all(self) -> list[Product]:
        raise CatalogUnavailableError("HTTP 503")

    def fetch_one(self, product_id: str) -> Product | None:
        raise CatalogUnavailableError("HTTP 503")


def make_product(product_id: str, price: str = "10.00", **overrides) -> Product:
    """テスト用商品を作成する."""
    defaults = {
        "id": product_id,
        "title": f"Jacket {product_id}",
        "price": Money.of(Decimal(price)),
        "image_url": f"https://example.com/{product_id}.jpg",
        "gender": Gender.UNISEX,
    }
    defaults.update(overrides)
    return Product(**defaults)


@pytest.fixture(autouse=True)
def reset_dependencies():
    """DIコンテナの状態をテスト間でリセットする."""
    Dependencies.reset()
    yield
    Dependencies.reset()


@pytest.fixture
def storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture
def store(storage: InMemoryKeyValueStorage) -> CartStore:
    return CartStore(storage)
