"""カート明細行の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CartLine:
    """1商品あたりの購入希望数量（商品ID, 数量）."""

    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.product_id, str) or not self.product_id:
            raise ValueError("CartLine product_id cannot be empty")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"CartLine quantity must be an integer: {self.quantity!r}")
        if self.quantity < 1:
            raise ValueError("CartLine quantity must be at least 1")

    def with_quantity(self, quantity: int) -> CartLine:
        """数量を差し替えた新しい明細行を返す."""
        return CartLine(product_id=self.product_id, quantity=quantity)

    def to_dict(self) -> dict[str, Any]:
        """永続化用の辞書に変換する（{"id", "qty"} 形式）."""
        return {"id": self.product_id, "qty": self.quantity}
