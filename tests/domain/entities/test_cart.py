"""Cartのテスト."""
from storefront.domain.entities import Cart
from storefront.domain.value_objects import CartLine


class TestCart:
    """Cartの単体テスト."""

    def test_emptyで空のカートを生成(self) -> None:
        cart = Cart.empty()
        assert cart.is_empty() is True
        assert cart.total_quantity() == 0

    def test_add_lineで明細を追加(self) -> None:
        cart = Cart.empty()
        line = cart.add_line("A", 2)
        assert line == CartLine("A", 2)
        assert len(cart.get_lines()) == 1

    def test_add_lineで同じ商品は数量を加算(self) -> None:
        """同じ商品IDを追加すると明細が増えず数量が加算されることを確認."""
        cart = Cart.empty()
        cart.add_line("A", 2)
        cart.add_line("A", 3)
        assert cart.get_lines() == [CartLine("A", 5)]

    def test_add_lineの不正な数量は1として扱う(self) -> None:
        cart = Cart.empty()
        cart.add_line("A", "abc")
        cart.add_line("B", 0)
        assert cart.get_line("A").quantity == 1
        assert cart.get_line("B").quantity == 1

    def test_set_quantityで数量を上書き(self) -> None:
        cart = Cart.from_lines([CartLine("A", 2)])
        updated = cart.set_quantity("A", 7)
        assert updated == CartLine("A", 7)

    def test_set_quantityで存在しない商品はNone(self) -> None:
        cart = Cart.empty()
        assert cart.set_quantity("A", 3) is None
        assert cart.is_empty() is True

    def test_set_quantityは順序を変えない(self) -> None:
        cart = Cart.from_lines([CartLine("A", 1), CartLine("B", 1), CartLine("C", 1)])
        cart.set_quantity("A", 9)
        assert [line.product_id for line in cart.get_lines()] == ["A", "B", "C"]

    def test_remove_lineで明細を削除(self) -> None:
        cart = Cart.from_lines([CartLine("A", 1), CartLine("B", 1)])
        assert cart.remove_line("A") is True
        assert cart.get_line("A") is None
        assert cart.remove_line("A") is False

    def test_clearで全明細を削除(self) -> None:
        cart = Cart.from_lines([CartLine("A", 1), CartLine("B", 1)])
        cart.clear()
        assert cart.is_empty() is True

    def test_重複した商品IDは先頭位置に合算(self) -> None:
        """生成時に重複IDが1明細に合算されることを確認."""
        cart = Cart.from_lines([CartLine("A", 1), CartLine("B", 2), CartLine("A", 3)])
        assert cart.get_lines() == [CartLine("A", 4), CartLine("B", 2)]

    def test_total_quantityで数量合計(self) -> None:
        cart = Cart.from_lines([CartLine("A", 2), CartLine("B", 3)])
        assert cart.total_quantity() == 5

    def test_get_linesで防御的コピーを取得(self) -> None:
        cart = Cart.from_lines([CartLine("A", 1)])
        lines = cart.get_lines()
        lines.clear()  # 外部でクリアしても
        assert len(cart.get_lines()) == 1  # 内部は影響なし
