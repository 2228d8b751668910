"""SubmitCheckoutUseCaseのテスト."""
from storefront.application.use_cases import SubmitCheckoutUseCase
from storefront.domain.value_objects import CheckoutDetails

VALID_FORM = {
    "full_name": "Ola Nordmann",
    "email": "ola@example.com",
    "address": "Storgata 1",
    "city": "Oslo",
    "postal_code": "0155",
    "country": "Norway",
}


class TestSubmitCheckoutUseCase:
    """SubmitCheckoutUseCaseの単体テスト."""

    def test_入力が正しければカートを空にして完了(self, store) -> None:
        store.add_line("A", 2)
        events = []
        store.subscribe(events.append)

        result = SubmitCheckoutUseCase(store).execute(CheckoutDetails.from_dict(VALID_FORM))

        assert result.success is True
        assert result.item_count == 2
        assert "order has been placed" in result.message
        assert store.read().is_empty() is True
        assert len(events) == 1

    def test_必須項目が未入力ならカートを保持(self, store) -> None:
        store.add_line("A")
        form = dict(VALID_FORM, address="")

        result = SubmitCheckoutUseCase(store).execute(CheckoutDetails.from_dict(form))

        assert result.success is False
        assert result.message == "Please complete the required fields."
        assert result.errors == ("address is required",)
        assert store.total_quantity() == 1

    def test_空のカートは送信できない(self, store) -> None:
        result = SubmitCheckoutUseCase(store).execute(CheckoutDetails.from_dict(VALID_FORM))
        assert result.success is False
        assert result.message == "Your cart is empty."
