"""チェックアウト入力の検証サービス."""
from dataclasses import dataclass

from ..value_objects import CheckoutDetails, Email


@dataclass(frozen=True)
class ValidationResult:
    """検証結果."""

    is_valid: bool
    errors: tuple[str, ...]

    @classmethod
    def success(cls) -> "ValidationResult":
        """成功結果を生成する."""
        return cls(is_valid=True, errors=())

    @classmethod
    def failure(cls, errors: list[str]) -> "ValidationResult":
        """失敗結果を生成する."""
        return cls(is_valid=False, errors=tuple(errors))


class CheckoutValidator:
    """チェックアウトフォームの必須項目・形式チェック."""

    def validate(self, details: CheckoutDetails) -> ValidationResult:
        """フォームが送信可能かどうかを検証する."""
        errors: list[str] = []

        for name, value in details.required_fields().items():
            if not value or not value.strip():
                errors.append(f"{name} is required")

        if details.email.strip():
            try:
                Email(details.email.strip())
            except ValueError as e:
                errors.append(str(e))

        if errors:
            return ValidationResult.failure(errors)
        return ValidationResult.success()
