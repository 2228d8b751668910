"""カートバッジ取得ユースケース."""
from dataclasses import dataclass

from storefront.domain.services import CartStore


@dataclass(frozen=True)
class CartBadge:
    """ヘッダーのカート数量バッジ."""

    count: int

    @property
    def hidden(self) -> bool:
        """0件なら非表示."""
        return self.count <= 0

    @property
    def text(self) -> str:
        """表示文字列."""
        return str(self.count)


class GetCartBadgeUseCase:
    """カタログと結合せずにカートの合計数量を返すユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def execute(self) -> CartBadge:
        """バッジ表示内容を取得する."""
        return CartBadge(count=self._cart_store.total_quantity())
