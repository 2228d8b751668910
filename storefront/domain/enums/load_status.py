"""カート読み込み結果の状態列挙型."""
from enum import Enum


class LoadStatus(str, Enum):
    """永続化スロットから読み込んだ結果の状態."""

    OK = "ok"
    ABSENT = "absent"  # スロットが未作成
    CORRUPT = "corrupt"  # デコード不能・不正な形式
    UNAVAILABLE = "unavailable"  # ストレージ自体が利用不可
