"""カート合計金額の値オブジェクト."""
from dataclasses import dataclass

from .money import Money


@dataclass(frozen=True)
class CartTotals:
    """小計・税・合計."""

    subtotal: Money
    tax: Money
    total: Money

    def formatted(self) -> dict[str, str]:
        """表示用に整形した金額を返す."""
        return {
            "subtotal": self.subtotal.format(),
            "tax": self.tax.format(),
            "total": self.total.format(),
        }
