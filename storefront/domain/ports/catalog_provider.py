"""商品カタログプロバイダーインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Product


class CatalogUnavailableError(Exception):
    """カタログの取得に失敗したエラー（通信エラー・不正なレスポンス）."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to load products: {reason}")


class CatalogProvider(ABC):
    """外部の読み取り専用商品カタログ."""

    @abstractmethod
    def fetch_all(self) -> list[Product]:
        """全商品を取得する.

        Raises:
            CatalogUnavailableError: 取得に失敗した場合
        """
        pass

    @abstractmethod
    def fetch_one(self, product_id: str) -> Product | None:
        """商品IDで1件取得する（存在しなければNone）.

        Raises:
            CatalogUnavailableError: 取得に失敗した場合
        """
        pass
