"""カート取得ユースケース."""
from dataclasses import dataclass

from storefront.domain.entities import Product
from storefront.domain.ports import CatalogProvider
from storefront.domain.services import CartProjection, CartStore, TaxPolicy, no_tax
from storefront.domain.value_objects import CartLineItem, CartTotals


@dataclass(frozen=True)
class GetCartResult:
    """カート取得結果."""

    items: list[CartLineItem]
    totals: CartTotals

    @property
    def is_empty(self) -> bool:
        """表示できる明細がないか."""
        return not self.items


class GetCartUseCase:
    """カートをカタログと結合し、明細と合計金額を返すユースケース."""

    def __init__(
        self,
        cart_store: CartStore,
        catalog_provider: CatalogProvider,
        tax_policy: TaxPolicy = no_tax,
    ) -> None:
        """初期化.

        Args:
            cart_store: カートストア
            catalog_provider: 商品カタログプロバイダー
            tax_policy: 税額計算ポリシー
        """
        self._cart_store = cart_store
        self._catalog_provider = catalog_provider
        self._tax_policy = tax_policy

    def execute(self) -> GetCartResult:
        """現在のカートを取得する.

        Raises:
            CatalogUnavailableError: カタログの取得に失敗した場合
        """
        catalog_by_id = CartProjection.index_catalog(self._catalog_provider.fetch_all())
        return self.render(catalog_by_id)

    def render(self, catalog_by_id: dict[str, Product]) -> GetCartResult:
        """取得済みのカタログスナップショットで再計算する.

        カート変更通知を受けた再描画ではカタログを再取得しない。
        """
        items = CartProjection.project(self._cart_store.read(), catalog_by_id)
        totals = CartProjection.aggregate(items, self._tax_policy)
        return GetCartResult(items=items, totals=totals)
