"""カート集約ルート."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..value_objects import CartLine, Quantity


@dataclass
class Cart:
    """商品ごとの購入希望数量を保持するコンテナ（集約ルート）.

    明細は商品IDをキーとし、最初に追加された順序を保つ。
    """

    _lines: list[CartLine] = field(default_factory=list)

    def __post_init__(self) -> None:
        """同一商品IDの明細を先頭の位置に合算する."""
        merged: dict[str, CartLine] = {}
        for line in self._lines:
            existing = merged.get(line.product_id)
            if existing is None:
                merged[line.product_id] = line
            else:
                merged[line.product_id] = existing.with_quantity(existing.quantity + line.quantity)
        self._lines = list(merged.values())

    @classmethod
    def empty(cls) -> Cart:
        """空のカートを生成する."""
        return cls(_lines=[])

    @classmethod
    def from_lines(cls, lines: list[CartLine]) -> Cart:
        """明細のリストからカートを生成する."""
        return cls(_lines=list(lines))

    def add_line(self, product_id: str, quantity: object = 1) -> CartLine:
        """明細を追加する.

        既に同じ商品があれば数量を加算し、なければ末尾に追加する。
        """
        amount = Quantity.normalize(quantity)
        for i, line in enumerate(self._lines):
            if line.product_id == product_id:
                updated = line.with_quantity(line.quantity + amount)
                self._lines[i] = updated
                return updated
        line = CartLine(product_id=product_id, quantity=amount)
        self._lines.append(line)
        return line

    def set_quantity(self, product_id: str, quantity: object) -> CartLine | None:
        """既存明細の数量を上書きする（存在しなければ何もしない）."""
        for i, line in enumerate(self._lines):
            if line.product_id == product_id:
                updated = line.with_quantity(Quantity.normalize(quantity))
                self._lines[i] = updated
                return updated
        return None

    def remove_line(self, product_id: str) -> bool:
        """指定商品の明細を削除する."""
        for i, line in enumerate(self._lines):
            if line.product_id == product_id:
                self._lines.pop(i)
                return True
        return False

    def clear(self) -> None:
        """全明細を削除する."""
        self._lines.clear()

    def get_line(self, product_id: str) -> CartLine | None:
        """指定商品の明細を取得する."""
        for line in self._lines:
            if line.product_id == product_id:
                return line
        return None

    def get_lines(self) -> list[CartLine]:
        """明細のリストを取得（防御的コピー）."""
        return list(self._lines)

    def total_quantity(self) -> int:
        """全明細の数量合計."""
        return sum(line.quantity for line in self._lines)

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self._lines) == 0
