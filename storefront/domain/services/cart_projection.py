"""カートとカタログスナップショットの結合（投影）サービス."""
from collections.abc import Callable, Iterable, Mapping
from decimal import Decimal

from ..entities import Cart, Product
from ..value_objects import CartLineItem, CartTotals, Money

TaxPolicy = Callable[[Money], Money]


def no_tax(subtotal: Money) -> Money:
    """税額ゼロ（税計算が決まるまでの既定ポリシー）."""
    return Money.zero()


def flat_rate_tax(rate: Decimal | str) -> TaxPolicy:
    """小計に一律の税率を掛けるポリシーを生成する."""
    rate_value = Decimal(str(rate))
    if rate_value < 0:
        raise ValueError("Tax rate cannot be negative")

    def policy(subtotal: Money) -> Money:
        return subtotal.multiply_rate(rate_value)

    return policy


class CartProjection:
    """カート明細を価格・商品名付きの表示用明細に変換するサービス.

    いずれも入力のみに依存する純粋関数。
    """

    @staticmethod
    def index_catalog(products: Iterable[Product]) -> dict[str, Product]:
        """商品リストを商品IDで引ける辞書に変換する."""
        return {product.id: product for product in products}

    @staticmethod
    def project(cart: Cart, catalog_by_id: Mapping[str, Product]) -> list[CartLineItem]:
        """カート明細をカタログと結合する.

        順序はカートの順序を保つ。単価は常に現在のスナップショットから取る。
        カタログに存在しない商品の明細は出力しない（永続化された明細は残る）。
        """
        items: list[CartLineItem] = []
        for line in cart.get_lines():
            product = catalog_by_id.get(line.product_id)
            if product is None:
                continue
            items.append(
                CartLineItem(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    title=product.title,
                    image_url=product.image_url,
                    unit_price=product.price,
                    line_total=product.price.multiply(line.quantity),
                )
            )
        return items

    @staticmethod
    def aggregate(items: Iterable[CartLineItem], tax_policy: TaxPolicy = no_tax) -> CartTotals:
        """小計・税・合計を計算する."""
        subtotal = Money.zero()
        for item in items:
            subtotal = subtotal.add(item.line_total)
        tax = tax_policy(subtotal)
        return CartTotals(subtotal=subtotal, tax=tax, total=subtotal.add(tax))
