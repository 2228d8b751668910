"""カート追加ユースケース."""
from dataclasses import dataclass

from storefront.domain.services import CartStore


@dataclass(frozen=True)
class AddToCartResult:
    """カート追加結果."""

    product_id: str
    quantity: int
    cart_count: int


class AddToCartUseCase:
    """カートに商品を追加するユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def execute(self, product_id: str, quantity: object = 1) -> AddToCartResult:
        """商品をカートに追加する.

        同じ商品を追加した場合は数量を加算する。

        Returns:
            追加後の明細数量とバッジ用の合計数量
        """
        self._cart_store.add_line(product_id, quantity)

        cart = self._cart_store.read()
        line = cart.get_line(product_id)
        return AddToCartResult(
            product_id=product_id,
            quantity=line.quantity if line else 0,
            cart_count=cart.total_quantity(),
        )
