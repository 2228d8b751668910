"""モック商品カタログプロバイダー."""
from decimal import Decimal

from storefront.domain.entities import Product
from storefront.domain.enums import Gender
from storefront.domain.ports import CatalogProvider
from storefront.domain.value_objects import Money


class MockCatalogProvider(CatalogProvider):
    """モック商品カタログプロバイダー（開発・デモ用）."""

    # サンプルの商品 (id, 商品名, 価格, 性別)
    SAMPLE_PRODUCTS = [
        ("rd-001", "Rainy Days Akra Jacket", "129.99", Gender.MEN),
        ("rd-002", "Rainy Days Thunderbolt Jacket", "149.99", Gender.MEN),
        ("rd-003", "Rainy Days Venture Jacket", "99.99", Gender.WOMEN),
        ("rd-004", "Rainy Days Aurora Jacket", "139.99", Gender.WOMEN),
        ("rd-005", "Rainy Days Storm Shell", "89.99", Gender.UNISEX),
        ("rd-006", "Rainy Days Trailblazer Jacket", "119.99", Gender.UNISEX),
    ]

    def __init__(self, products: list[Product] | None = None) -> None:
        """初期化.

        Args:
            products: 提供する商品（省略時はサンプル商品）
        """
        if products is None:
            products = [
                Product(
                    id=pid,
                    title=title,
                    price=Money.of(Decimal(price)),
                    image_url=f"https://example.com/images/{pid}.jpg",
                    gender=gender,
                )
                for pid, title, price, gender in self.SAMPLE_PRODUCTS
            ]
        self._products = list(products)

    def fetch_all(self) -> list[Product]:
        """全商品を取得する."""
        return list(self._products)

    def fetch_one(self, product_id: str) -> Product | None:
        """商品を1件取得する."""
        for product in self._products:
            if product.id == product_id:
                return product
        return None
