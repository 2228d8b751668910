"""永続キーバリューストレージインターフェース."""
from abc import ABC, abstractmethod


class StorageError(Exception):
    """ストレージが利用できないエラー（容量超過・無効化など）."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Storage unavailable for {key}: {reason}")


class KeyValueStorage(ABC):
    """オリジン単位で分離された不透明なバイト列スロット."""

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """キーに対応する値を取得する（存在しなければNone）.

        Raises:
            StorageError: ストレージが利用できない場合
        """
        pass

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """キーに値を保存する（既存の値は置き換える）.

        Raises:
            StorageError: ストレージが利用できない場合
        """
        pass
