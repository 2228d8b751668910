"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """金額（USD）を表現する値オブジェクト.

    値は常にセント単位に丸めた Decimal で保持する。
    """

    value: Decimal

    def __post_init__(self) -> None:
        """バリデーションと正規化."""
        try:
            amount = Decimal(str(self.value))
        except (InvalidOperation, ValueError) as e:
            raise ValueError(f"Invalid money value: {self.value!r}") from e
        if not amount.is_finite():
            raise ValueError("Money value must be finite")
        if amount < 0:
            raise ValueError("Money value cannot be negative")
        object.__setattr__(self, "value", amount.quantize(_CENT, rounding=ROUND_HALF_EVEN))

    @classmethod
    def of(cls, value: Decimal | int | float | str) -> Money:
        """指定金額でMoneyを生成する."""
        return cls(value)

    @classmethod
    def zero(cls) -> Money:
        """ゼロを生成する."""
        return cls(Decimal("0"))

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す."""
        return Money(self.value + other.value)

    def multiply(self, factor: int) -> Money:
        """金額を乗算して新しいMoneyを返す."""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(self.value * factor)

    def multiply_rate(self, rate: Decimal) -> Money:
        """税率などの小数倍率を掛けて新しいMoneyを返す."""
        if rate < 0:
            raise ValueError("Rate cannot be negative")
        return Money(self.value * rate)

    def is_zero(self) -> bool:
        """ゼロか判定."""
        return self.value == 0

    def format(self) -> str:
        """表示用フォーマット（例: "$1,234.50"）."""
        return f"${self.value:,.2f}"

    def __str__(self) -> str:
        """文字列表現."""
        return self.format()
