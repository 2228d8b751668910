"""Noroff Rainy Days API 商品カタログプロバイダー.

公開 API (https://v2.api.noroff.dev/rainy-days) から商品を取得し、
アプリ全体で使う Product の形に正規化する。
"""
import logging
import os
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from storefront.domain.entities import Product
from storefront.domain.enums import Gender
from storefront.domain.ports import CatalogProvider, CatalogUnavailableError
from storefront.domain.value_objects import Money

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://v2.api.noroff.dev/rainy-days"


class NoroffCatalogProvider(CatalogProvider):
    """Noroff v2 API から商品カタログを取得するプロバイダー."""

    DEFAULT_TIMEOUT = 10  # seconds
    DEFAULT_TITLE = "Jacket"

    def __init__(self, base_url: str | None = None, timeout: int | None = None) -> None:
        """初期化.

        Args:
            base_url: API のベース URL
            timeout: リクエストタイムアウト秒数
        """
        self._base_url = (base_url or os.environ.get("CATALOG_API_URL", DEFAULT_BASE_URL)).rstrip("/")
        self._timeout = timeout or int(
            os.environ.get("CATALOG_API_TIMEOUT", self.DEFAULT_TIMEOUT)
        )
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        """リトライ機能付きの HTTP セッションを作成する."""
        session = requests.Session()
        session.headers.update({"Accept": "application/json"})

        # リトライ設定
        retry_strategy = Retry(
            total=3,
            backoff_factor=0.5,
            status_forcelist=[500, 502, 503, 504],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def fetch_all(self) -> list[Product]:
        """全商品を取得する."""
        try:
            response = self._session.get(self._base_url, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.error(f"Failed to fetch products: {e}")
            raise CatalogUnavailableError(str(e)) from e
        except ValueError as e:
            logger.error(f"Catalog response is not JSON: {e}")
            raise CatalogUnavailableError("Malformed JSON response") from e

        data = payload if isinstance(payload, list) else self._unwrap(payload)
        if not isinstance(data, list):
            raise CatalogUnavailableError("Unexpected API response shape")
        return [self._to_product(p) for p in data if isinstance(p, dict) and p.get("id")]

    def fetch_one(self, product_id: str) -> Product | None:
        """商品を1件取得する."""
        try:
            response = self._session.get(
                f"{self._base_url}/{product_id}",
                timeout=self._timeout,
            )
            if response.status_code == 404:
                return None
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.error(f"Failed to fetch product {product_id}: {e}")
            raise CatalogUnavailableError(str(e)) from e
        except ValueError as e:
            logger.error(f"Catalog response is not JSON: {e}")
            raise CatalogUnavailableError("Malformed JSON response") from e

        data = self._unwrap(payload)
        if not isinstance(data, dict) or not data.get("id"):
            raise CatalogUnavailableError("Unexpected API response shape")
        return self._to_product(data)

    @staticmethod
    def _unwrap(payload: Any) -> Any:
        """{"data": ...} 形式のエンベロープを外す."""
        if isinstance(payload, dict) and "data" in payload:
            return payload["data"]
        return payload

    def _to_product(self, data: dict[str, Any]) -> Product:
        """API レスポンスを Product に変換する.

        価格は discountedPrice を優先し、画像は image.url → images[0].url の順に探す。
        """
        return Product(
            id=str(data["id"]),
            title=self._to_text(data.get("title")) or self.DEFAULT_TITLE,
            price=self._to_price(data),
            image_url=self._to_image_url(data),
            gender=Gender.from_raw(data.get("gender")),
            description=self._to_text(data.get("description")),
        )

    @staticmethod
    def _to_price(data: dict[str, Any]) -> Money:
        raw = data.get("discountedPrice")
        if raw is None:
            raw = data.get("price")
        try:
            return Money.of(raw if raw is not None else 0)
        except ValueError:
            logger.warning("Invalid price for product %s: %r", data.get("id"), raw)
            return Money.zero()

    @classmethod
    def _to_image_url(cls, data: dict[str, Any]) -> str:
        image = data.get("image")
        if isinstance(image, dict) and image.get("url"):
            return cls._to_text(image["url"])
        images = data.get("images")
        if isinstance(images, list) and images and isinstance(images[0], dict):
            return cls._to_text(images[0].get("url"))
        return ""

    @staticmethod
    def _to_text(value: Any) -> str:
        """文字列項目を str に揃える（None は空文字）."""
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)
