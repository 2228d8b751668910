"""GetCartBadgeUseCaseのテスト."""
from storefront.application.use_cases import GetCartBadgeUseCase


class TestGetCartBadgeUseCase:
    """GetCartBadgeUseCaseの単体テスト."""

    def test_空のカートは非表示(self, store) -> None:
        badge = GetCartBadgeUseCase(store).execute()
        assert badge.count == 0
        assert badge.hidden is True

    def test_数量合計を表示(self, store) -> None:
        store.add_line("A", 2)
        store.add_line("B", 1)
        badge = GetCartBadgeUseCase(store).execute()
        assert badge.text == "3"
        assert badge.hidden is False

    def test_変更通知でバッジを更新(self, store) -> None:
        use_case = GetCartBadgeUseCase(store)
        shown: list[str] = []
        store.subscribe(lambda event: shown.append(use_case.execute().text))

        store.add_line("A")
        store.add_line("A")
        store.clear()

        assert shown == ["1", "2", "0"]
