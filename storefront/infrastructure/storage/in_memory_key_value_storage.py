"""キーバリューストレージのインメモリ実装."""
from storefront.domain.ports import KeyValueStorage


class InMemoryKeyValueStorage(KeyValueStorage):
    """キーバリューストレージのインメモリ実装（テスト・ローカル開発用）."""

    def __init__(self) -> None:
        """初期化."""
        self._values: dict[str, bytes] = {}

    def get(self, key: str) -> bytes | None:
        """値を取得する."""
        return self._values.get(key)

    def set(self, key: str, value: bytes) -> None:
        """値を保存する."""
        self._values[key] = bytes(value)
