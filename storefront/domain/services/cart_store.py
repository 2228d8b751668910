"""カートストア（カート状態の唯一の書き込み元）."""
import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..entities import Cart
from ..enums import LoadStatus
from ..ports import KeyValueStorage, StorageError
from ..value_objects import CartLine
from .cart_serializer import CartLoadResult, CartSerializer

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "rainydays_cart_v1"
CART_UPDATED_EVENT = "cart:updated"


@dataclass(frozen=True)
class CartUpdatedEvent:
    """カート変更通知.

    lines は参考情報。購読者は store.read() で再取得すること。
    """

    lines: tuple[CartLine, ...]
    name: str = CART_UPDATED_EVENT


@dataclass(frozen=True)
class CartWriteResult:
    """カート書き込み結果."""

    persisted: bool
    error: StorageError | None = None


CartListener = Callable[[CartUpdatedEvent], None]


class CartStore:
    """永続化されたカートの読み書きと変更通知を担うストア.

    全操作は同期的で、呼び出し元に例外を送出しない。
    ストレージ障害時は空カートへの復旧・書き込みスキップで継続する。
    """

    def __init__(self, storage: KeyValueStorage, key: str = CART_STORAGE_KEY) -> None:
        """初期化.

        Args:
            storage: 永続キーバリューストレージ
            key: カートを保存するキー
        """
        self._storage = storage
        self._key = key
        self._listeners: list[CartListener] = []

    @property
    def key(self) -> str:
        """保存キー."""
        return self._key

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """変更通知の購読者を登録する.

        Returns:
            購読を解除する関数
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load(self) -> CartLoadResult:
        """カートを読み込み、復旧の有無を含めた結果を返す."""
        try:
            blob = self._storage.get(self._key)
        except StorageError as e:
            logger.warning(f"Cart storage unavailable, using empty cart: {e}")
            return CartLoadResult(cart=Cart.empty(), status=LoadStatus.UNAVAILABLE)

        if blob is None:
            return CartLoadResult(cart=Cart.empty(), status=LoadStatus.ABSENT)
        return CartSerializer.decode(blob)

    def read(self) -> Cart:
        """現在のカートを取得する（不正・未作成時は空カート）."""
        return self.load().cart

    def write(self, cart: Cart) -> CartWriteResult:
        """カート全体を置き換えて保存し、変更を通知する.

        保存に失敗しても通知は行う（永続化はベストエフォート）。
        """
        result = self._persist(cart)
        self._notify(cart)
        return result

    def add_line(self, product_id: str, quantity: object = 1) -> None:
        """商品を追加する（既存なら数量を加算）."""
        if not self._is_valid_id(product_id):
            logger.warning("Ignoring add_line with invalid product id: %r", product_id)
            return
        cart = self.read()
        cart.add_line(product_id, quantity)
        self.write(cart)

    def set_quantity(self, product_id: str, quantity: object) -> bool:
        """既存明細の数量を設定する.

        数量は 1 以上に正規化する。明細が存在しなければ何もしない。

        Returns:
            更新したかどうか
        """
        if not self._is_valid_id(product_id):
            return False
        cart = self.read()
        if cart.set_quantity(product_id, quantity) is None:
            return False
        self.write(cart)
        return True

    def increment(self, product_id: str) -> bool:
        """数量を1増やす."""
        line = self.read().get_line(product_id) if self._is_valid_id(product_id) else None
        if line is None:
            return False
        return self.set_quantity(product_id, line.quantity + 1)

    def decrement(self, product_id: str) -> bool:
        """数量を1減らす（下限は1）."""
        line = self.read().get_line(product_id) if self._is_valid_id(product_id) else None
        if line is None:
            return False
        return self.set_quantity(product_id, line.quantity - 1)

    def remove_line(self, product_id: str) -> None:
        """明細を削除する（存在しなくてもエラーにしない）."""
        cart = self.read()
        cart.remove_line(product_id)
        self.write(cart)

    def clear(self) -> None:
        """カートを空にする."""
        self.write(Cart.empty())

    def total_quantity(self) -> int:
        """全明細の数量合計（バッジ表示用）."""
        return self.read().total_quantity()

    def _persist(self, cart: Cart) -> CartWriteResult:
        """ストレージに保存する."""
        try:
            self._storage.set(self._key, CartSerializer.encode(cart))
        except StorageError as e:
            logger.warning(f"Cart not persisted: {e}")
            return CartWriteResult(persisted=False, error=e)
        return CartWriteResult(persisted=True)

    def _notify(self, cart: Cart) -> None:
        """購読者に変更を通知する（登録順）."""
        event = CartUpdatedEvent(lines=tuple(cart.get_lines()))
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Cart listener failed: %r", listener)

    @staticmethod
    def _is_valid_id(product_id: object) -> bool:
        return isinstance(product_id, str) and bool(product_id)
