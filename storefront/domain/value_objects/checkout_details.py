"""チェックアウトフォームの入力値."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class CheckoutDetails:
    """チェックアウトフォームの入力（未検証）."""

    full_name: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    postal_code: str = ""
    country: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CheckoutDetails:
        """フォーム値の辞書から生成する（未知のキーは無視）."""
        known = {f.name for f in fields(cls)}
        values = {k: str(v).strip() for k, v in data.items() if k in known and v is not None}
        return cls(**values)

    def required_fields(self) -> dict[str, str]:
        """必須項目と値の対応を返す."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
