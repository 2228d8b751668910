"""ChangeQuantityUseCaseのテスト."""
from storefront.application.use_cases import ChangeQuantityUseCase


class TestChangeQuantityUseCase:
    """ChangeQuantityUseCaseの単体テスト."""

    def test_数量を直接入力できる(self, store) -> None:
        store.add_line("A")
        result = ChangeQuantityUseCase(store).set("A", "4")
        assert result.updated is True
        assert result.quantity == 4

    def test_不正な入力は1になる(self, store) -> None:
        store.add_line("A", 3)
        result = ChangeQuantityUseCase(store).set("A", "")
        assert result.quantity == 1

    def test_プラスボタンとマイナスボタン(self, store) -> None:
        store.add_line("A")
        use_case = ChangeQuantityUseCase(store)
        assert use_case.increment("A").quantity == 2
        assert use_case.decrement("A").quantity == 1
        assert use_case.decrement("A").quantity == 1

    def test_存在しない商品は更新されない(self, store) -> None:
        result = ChangeQuantityUseCase(store).set("missing", 2)
        assert result.updated is False
        assert result.quantity == 0
        assert store.read().is_empty() is True
