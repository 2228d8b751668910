"""CatalogProvider ファクトリ."""
import logging
import os

from storefront.domain.ports import CatalogProvider

logger = logging.getLogger(__name__)


def create_catalog_provider() -> CatalogProvider:
    """環境変数に基づいてCatalogProviderを生成する.

    CATALOG_PROVIDER:
        "mock"   → MockCatalogProvider（ローカル開発・テスト用）
        "noroff" → NoroffCatalogProvider
        未設定    → NoroffCatalogProvider（デフォルト）
    """
    provider_type = os.environ.get("CATALOG_PROVIDER")
    if provider_type == "mock":
        from storefront.infrastructure.providers.mock_catalog_provider import (
            MockCatalogProvider,
        )

        return MockCatalogProvider()

    if provider_type and provider_type != "noroff":
        logger.warning("Unknown CATALOG_PROVIDER=%s, falling back to Noroff", provider_type)

    from storefront.infrastructure.providers.noroff_catalog_provider import (
        NoroffCatalogProvider,
    )

    return NoroffCatalogProvider()
