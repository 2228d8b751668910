"""キーバリューストレージのファイル実装."""
import logging
import os
import re
import tempfile
from pathlib import Path

from storefront.domain.ports import KeyValueStorage, StorageError

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9._:-]+$")


class FileKeyValueStorage(KeyValueStorage):
    """1キー1ファイルで保存するストレージ.

    ディレクトリがオリジン単位のスコープに相当する。
    """

    def __init__(self, directory: str | Path | None = None) -> None:
        """初期化.

        Args:
            directory: 保存先ディレクトリ（省略時は CART_STORAGE_DIR）
        """
        self._directory = Path(
            directory or os.environ.get("CART_STORAGE_DIR", ".storefront")
        )

    @property
    def directory(self) -> Path:
        """保存先ディレクトリ."""
        return self._directory

    def get(self, key: str) -> bytes | None:
        """値を取得する."""
        path = self._path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(key, str(e)) from e

    def set(self, key: str, value: bytes) -> None:
        """値を一時ファイル経由で置き換える."""
        path = self._path_for(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise StorageError(key, str(e)) from e

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise StorageError(key, "invalid storage key")
        return self._directory / key
