"""商品一覧取得ユースケース."""
from dataclasses import dataclass

from storefront.domain.entities import Product
from storefront.domain.ports import CatalogProvider
from storefront.domain.services import ProductFilter


@dataclass(frozen=True)
class ProductListResult:
    """商品一覧取得結果."""

    products: list[Product]
    gender: str
    query: str

    @property
    def is_empty(self) -> bool:
        """条件に合う商品がないか."""
        return not self.products


class GetProductListUseCase:
    """カタログから商品一覧を取得し、条件で絞り込むユースケース."""

    def __init__(self, catalog_provider: CatalogProvider) -> None:
        """初期化.

        Args:
            catalog_provider: 商品カタログプロバイダー
        """
        self._catalog_provider = catalog_provider

    def execute(self, gender: str = "", query: str = "") -> ProductListResult:
        """商品一覧を取得する.

        Args:
            gender: 性別フィルタ（women / men / unisex、空なら全件）
            query: 商品名キーワード

        Returns:
            商品一覧取得結果

        Raises:
            CatalogUnavailableError: カタログの取得に失敗した場合
        """
        products = self._catalog_provider.fetch_all()
        filtered = ProductFilter.apply(products, gender=gender, query=query)
        return ProductListResult(products=filtered, gender=gender, query=query)
