"""Moneyのテスト."""
from decimal import Decimal

import pytest

from storefront.domain.value_objects import Money


class TestMoney:
    """Moneyの単体テスト."""

    def test_正の金額で生成できる(self) -> None:
        """正の金額を指定してMoneyを生成できることを確認."""
        money = Money(Decimal("129.99"))
        assert money.value == Decimal("129.99")

    def test_floatはセント単位に丸められる(self) -> None:
        """floatで指定しても小数第2位に正規化されることを確認."""
        assert Money.of(129.99).value == Decimal("129.99")
        assert Money.of(10).value == Decimal("10.00")

    def test_負の金額で生成するとエラー(self) -> None:
        """負の金額を指定するとValueErrorが発生することを確認."""
        with pytest.raises(ValueError, match="cannot be negative"):
            Money.of(-1)

    def test_数値でない値はエラー(self) -> None:
        with pytest.raises(ValueError):
            Money.of("abc")

    def test_zeroでゼロを生成できる(self) -> None:
        assert Money.zero().is_zero() is True

    def test_addで加算できる(self) -> None:
        """浮動小数点誤差なく加算できることを確認."""
        assert Money.of(0.1).add(Money.of(0.2)).value == Decimal("0.30")

    def test_multiplyで乗算できる(self) -> None:
        assert Money.of("9.99").multiply(2).value == Decimal("19.98")

    def test_multiplyで負の倍率はエラー(self) -> None:
        with pytest.raises(ValueError, match="Factor cannot be negative"):
            Money.of(1).multiply(-1)

    def test_multiply_rateは偶数丸め(self) -> None:
        """半端は銀行丸めになることを確認."""
        assert Money.of("0.25").multiply_rate(Decimal("0.5")).value == Decimal("0.12")
        assert Money.of("0.35").multiply_rate(Decimal("0.5")).value == Decimal("0.18")

    def test_formatで米ドル表記(self) -> None:
        """formatで "$1,234.50" 形式になることを確認."""
        assert Money.of("1234.5").format() == "$1,234.50"
        assert Money.zero().format() == "$0.00"

    def test_strはformatと同じ(self) -> None:
        assert str(Money.of("24.98")) == "$24.98"

    def test_同じ金額は等価(self) -> None:
        assert Money.of("5") == Money.of("5.00")
