"""カートクリアユースケース."""
from storefront.domain.services import CartStore


class ClearCartUseCase:
    """カートを全クリアするユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def execute(self) -> None:
        """カートを全クリアする."""
        self._cart_store.clear()
