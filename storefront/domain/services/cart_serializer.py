"""カートの永続化フォーマット変換サービス."""
import json
import logging
from dataclasses import dataclass
from typing import Any

from ..entities import Cart
from ..enums import LoadStatus
from ..value_objects import CartLine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLoadResult:
    """永続化スロットからの読み込み結果.

    失敗時も cart は常に利用可能な値（空カート）になる。
    """

    cart: Cart
    status: LoadStatus
    dropped_lines: int = 0

    @property
    def recovered(self) -> bool:
        """空カートへの復旧が行われたか."""
        return self.status in (LoadStatus.CORRUPT, LoadStatus.UNAVAILABLE)


class CartSerializer:
    """カートと UTF-8 JSON（[{"id": str, "qty": int}, ...]）の相互変換."""

    @staticmethod
    def encode(cart: Cart) -> bytes:
        """カートをバイト列に変換する."""
        payload = [line.to_dict() for line in cart.get_lines()]
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")

    @classmethod
    def decode(cls, blob: bytes) -> CartLoadResult:
        """バイト列をカートに変換する.

        全体が不正（JSONでない・入れ子が深すぎる・配列でない）なら CORRUPT の空カート、
        要素単位の不正は個別に除外する。
        """
        try:
            data = json.loads(blob.decode("utf-8"))
        except (UnicodeDecodeError, ValueError, RecursionError) as e:
            logger.warning(f"Cart blob is not valid JSON: {e}")
            return CartLoadResult(cart=Cart.empty(), status=LoadStatus.CORRUPT)

        if not isinstance(data, list):
            logger.warning("Cart blob is not a list: %s", type(data).__name__)
            return CartLoadResult(cart=Cart.empty(), status=LoadStatus.CORRUPT)

        lines: list[CartLine] = []
        dropped = 0
        for entry in data:
            line = cls._to_line(entry)
            if line is None:
                dropped += 1
                continue
            lines.append(line)

        if dropped:
            logger.warning("Dropped %d malformed cart lines", dropped)
        return CartLoadResult(cart=Cart.from_lines(lines), status=LoadStatus.OK, dropped_lines=dropped)

    @staticmethod
    def _to_line(entry: Any) -> CartLine | None:
        """1要素を明細に変換する（不正ならNone）."""
        if not isinstance(entry, dict):
            return None
        product_id = entry.get("id")
        qty = entry.get("qty")
        if not isinstance(product_id, str) or not product_id:
            return None
        if isinstance(qty, bool):
            return None
        if isinstance(qty, float) and qty.is_integer():
            qty = int(qty)
        if not isinstance(qty, int) or qty < 1:
            return None
        return CartLine(product_id=product_id, quantity=qty)
