"""カート削除ユースケース."""
from dataclasses import dataclass

from storefront.domain.services import CartStore


@dataclass(frozen=True)
class RemoveFromCartResult:
    """カート削除結果."""

    product_id: str
    cart_count: int


class RemoveFromCartUseCase:
    """カートから商品を削除するユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def execute(self, product_id: str) -> RemoveFromCartResult:
        """明細を削除する（存在しない場合も成功扱い）."""
        self._cart_store.remove_line(product_id)
        return RemoveFromCartResult(
            product_id=product_id,
            cart_count=self._cart_store.total_quantity(),
        )
