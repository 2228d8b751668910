"""商品詳細取得ユースケース."""
from dataclasses import dataclass

from storefront.domain.entities import Product
from storefront.domain.identifiers import ProductId
from storefront.domain.ports import CatalogProvider
from storefront.domain.services import CartStore


class ProductNotFoundError(Exception):
    """商品が見つからないエラー."""

    def __init__(self, product_id: ProductId) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


@dataclass(frozen=True)
class ProductDetailResult:
    """商品詳細取得結果."""

    product: Product
    quantity_in_cart: int


class GetProductDetailUseCase:
    """商品詳細を取得するユースケース."""

    def __init__(self, catalog_provider: CatalogProvider, cart_store: CartStore) -> None:
        """初期化.

        Args:
            catalog_provider: 商品カタログプロバイダー
            cart_store: カートストア
        """
        self._catalog_provider = catalog_provider
        self._cart_store = cart_store

    def execute(self, product_id: ProductId) -> ProductDetailResult:
        """商品詳細を取得する.

        Raises:
            ProductNotFoundError: 商品が存在しない場合
            CatalogUnavailableError: カタログの取得に失敗した場合
        """
        product = self._catalog_provider.fetch_one(product_id.value)
        if product is None:
            raise ProductNotFoundError(product_id)

        line = self._cart_store.read().get_line(product.id)
        return ProductDetailResult(
            product=product,
            quantity_in_cart=line.quantity if line else 0,
        )
