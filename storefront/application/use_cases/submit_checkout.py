"""チェックアウト送信ユースケース."""
import logging
from dataclasses import dataclass

from storefront.domain.services import CartStore, CheckoutValidator
from storefront.domain.value_objects import CheckoutDetails

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please complete the required fields."
EMPTY_CART_MESSAGE = "Your cart is empty."
THANK_YOU_MESSAGE = "Your order has been placed. A confirmation is on its way."


@dataclass(frozen=True)
class SubmitCheckoutResult:
    """チェックアウト送信結果."""

    success: bool
    message: str
    errors: tuple[str, ...] = ()
    item_count: int = 0


class SubmitCheckoutUseCase:
    """チェックアウトフォームを検証し、注文完了としてカートを空にするユースケース.

    注文データはどこにも送信しない（クライアント側のみの完了処理）。
    """

    def __init__(
        self,
        cart_store: CartStore,
        validator: CheckoutValidator | None = None,
    ) -> None:
        """初期化.

        Args:
            cart_store: カートストア
            validator: チェックアウト入力の検証サービス
        """
        self._cart_store = cart_store
        self._validator = validator or CheckoutValidator()

    def execute(self, details: CheckoutDetails) -> SubmitCheckoutResult:
        """チェックアウトを送信する.

        Args:
            details: フォーム入力

        Returns:
            送信結果（検証エラー時はカートを保持したまま失敗を返す）
        """
        cart = self._cart_store.read()
        if cart.is_empty():
            return SubmitCheckoutResult(success=False, message=EMPTY_CART_MESSAGE)

        validation = self._validator.validate(details)
        if not validation.is_valid:
            return SubmitCheckoutResult(
                success=False,
                message=REQUIRED_FIELDS_MESSAGE,
                errors=validation.errors,
            )

        item_count = cart.total_quantity()
        self._cart_store.clear()
        logger.info("Checkout completed with %d items", item_count)
        return SubmitCheckoutResult(
            success=True,
            message=THANK_YOU_MESSAGE,
            item_count=item_count,
        )
