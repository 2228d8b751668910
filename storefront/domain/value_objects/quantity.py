"""数量入力の正規化."""
import math
from decimal import Decimal, InvalidOperation


class Quantity:
    """カート数量のルール.

    数量は常に 1 以上の整数。不正な入力はエラーにせず 1 に丸める。
    """

    MINIMUM = 1

    @classmethod
    def normalize(cls, raw: object) -> int:
        """任意の入力を 1 以上の整数に正規化する.

        - int / 整数文字列: そのまま下限 1 で切り上げ
        - float / 小数文字列: 0 方向に切り捨ててから下限 1
        - None / bool / 空文字 / NaN / inf / その他: 1
        """
        parsed = cls._parse(raw)
        if parsed is None:
            return cls.MINIMUM
        return max(cls.MINIMUM, parsed)

    @staticmethod
    def _parse(raw: object) -> int | None:
        if raw is None or isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            return raw
        if isinstance(raw, float):
            if not math.isfinite(raw):
                return None
            return int(raw)
        if isinstance(raw, Decimal):
            return int(raw) if raw.is_finite() else None
        if isinstance(raw, str):
            text = raw.strip()
            if not text:
                return None
            try:
                number = Decimal(text)
            except InvalidOperation:
                return None
            if not number.is_finite():
                return None
            return int(number)
        return None
