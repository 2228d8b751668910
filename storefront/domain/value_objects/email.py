"""チェックアウト用メールアドレスの値オブジェクト."""
from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Email:
    """注文確認の送り先メールアドレス.

    前後の空白を除去し、ドメイン部は小文字に揃える。
    """

    value: str

    # ローカル部@ドメイン.TLD の簡易パターン（ブラウザの type="email" 相当）
    _PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

    def __post_init__(self) -> None:
        """正規化とバリデーション."""
        text = (self.value or "").strip()
        if not text:
            raise ValueError("Email cannot be empty")
        if not self._PATTERN.match(text):
            raise ValueError(f"Invalid email format: {text}")
        local, _, domain = text.rpartition("@")
        object.__setattr__(self, "value", f"{local}@{domain.lower()}")

    @property
    def domain(self) -> str:
        """ドメイン部."""
        return self.value.rpartition("@")[2]

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
