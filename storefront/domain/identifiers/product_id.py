"""商品識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductId:
    """カタログ上の商品ID（外部参照用）."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("ProductId cannot be empty")

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
