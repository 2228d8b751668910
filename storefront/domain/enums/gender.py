"""商品の対象性別列挙型."""
from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    """商品の対象性別."""

    WOMEN = "women"
    MEN = "men"
    UNISEX = "unisex"

    @classmethod
    def from_raw(cls, raw: object) -> Gender:
        """カタログの生の値を正規化する.

        "Female" を含めば WOMEN、"Male" を含めば MEN、それ以外は UNISEX。
        """
        text = str(raw or "").lower()
        # "female" は "male" を含むので先に判定する
        if "female" in text:
            return cls.WOMEN
        if "male" in text:
            return cls.MEN
        return cls.UNISEX

    def matches(self, selected: str) -> bool:
        """一覧フィルタの選択値にマッチするか判定する.

        women / men を選択した場合は unisex も含める。
        """
        if not selected:
            return True
        if self.value == selected:
            return True
        return self is Gender.UNISEX and selected in (Gender.WOMEN.value, Gender.MEN.value)
