"""カート数量変更ユースケース."""
from dataclasses import dataclass

from storefront.domain.services import CartStore


@dataclass(frozen=True)
class ChangeQuantityResult:
    """数量変更結果."""

    product_id: str
    updated: bool
    quantity: int


class ChangeQuantityUseCase:
    """カート明細の数量を直接入力・増減で変更するユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def set(self, product_id: str, quantity: object) -> ChangeQuantityResult:
        """数量を直接設定する（不正な入力は1に正規化）."""
        updated = self._cart_store.set_quantity(product_id, quantity)
        return self._result(product_id, updated)

    def increment(self, product_id: str) -> ChangeQuantityResult:
        """数量を1増やす."""
        updated = self._cart_store.increment(product_id)
        return self._result(product_id, updated)

    def decrement(self, product_id: str) -> ChangeQuantityResult:
        """数量を1減らす（1未満にはならない）."""
        updated = self._cart_store.decrement(product_id)
        return self._result(product_id, updated)

    def _result(self, product_id: str, updated: bool) -> ChangeQuantityResult:
        line = self._cart_store.read().get_line(product_id)
        return ChangeQuantityResult(
            product_id=product_id,
            updated=updated,
            quantity=line.quantity if line else 0,
        )
