"""依存性注入コンテナ."""
import logging
import os
from decimal import Decimal, InvalidOperation

from storefront.domain.ports import CatalogProvider, KeyValueStorage
from storefront.domain.services import CART_STORAGE_KEY, CartStore, TaxPolicy, flat_rate_tax, no_tax
from storefront.infrastructure import create_catalog_provider, create_key_value_storage

logger = logging.getLogger(__name__)


def _tax_rate() -> Decimal | None:
    """TAX_RATE 環境変数から税率を取得する（未設定ならNone）."""
    raw = os.environ.get("TAX_RATE")
    if not raw:
        return None
    try:
        rate = Decimal(raw)
    except InvalidOperation:
        logger.warning("Invalid TAX_RATE=%s, tax disabled", raw)
        return None
    if not rate.is_finite() or rate < 0:
        logger.warning("Invalid TAX_RATE=%s, tax disabled", raw)
        return None
    return rate


class Dependencies:
    """依存性を管理するコンテナ.

    ストレージは CART_STORAGE、カタログは CATALOG_PROVIDER 環境変数で切り替える。
    カートストアはプロセス内で1つだけ生成し、全ページが同じ購読者リストを共有する。
    """

    _storage: KeyValueStorage | None = None
    _cart_store: CartStore | None = None
    _catalog_provider: CatalogProvider | None = None
    _tax_policy: TaxPolicy | None = None

    @classmethod
    def get_storage(cls) -> KeyValueStorage:
        """キーバリューストレージを取得する."""
        if cls._storage is None:
            cls._storage = create_key_value_storage()
        return cls._storage

    @classmethod
    def get_cart_store(cls) -> CartStore:
        """カートストアを取得する."""
        if cls._cart_store is None:
            key = os.environ.get("CART_STORAGE_KEY", CART_STORAGE_KEY)
            cls._cart_store = CartStore(cls.get_storage(), key=key)
        return cls._cart_store

    @classmethod
    def get_catalog_provider(cls) -> CatalogProvider:
        """商品カタログプロバイダーを取得する."""
        if cls._catalog_provider is None:
            cls._catalog_provider = create_catalog_provider()
        return cls._catalog_provider

    @classmethod
    def get_tax_policy(cls) -> TaxPolicy:
        """税額計算ポリシーを取得する（TAX_RATE 未設定なら税額ゼロ）."""
        if cls._tax_policy is None:
            rate = _tax_rate()
            cls._tax_policy = flat_rate_tax(rate) if rate is not None else no_tax
        return cls._tax_policy

    @classmethod
    def set_storage(cls, storage: KeyValueStorage) -> None:
        """ストレージを設定する（テスト用）."""
        cls._storage = storage
        cls._cart_store = None

    @classmethod
    def set_catalog_provider(cls, provider: CatalogProvider) -> None:
        """商品カタログプロバイダーを設定する（テスト用）."""
        cls._catalog_provider = provider

    @classmethod
    def set_tax_policy(cls, policy: TaxPolicy) -> None:
        """税額計算ポリシーを設定する（テスト用）."""
        cls._tax_policy = policy

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._storage = None
        cls._cart_store = None
        cls._catalog_provider = None
        cls._tax_policy = None
