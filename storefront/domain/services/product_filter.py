"""商品一覧フィルタサービス."""
from ..entities import Product


class ProductFilter:
    """性別・キーワードによる商品一覧の絞り込み."""

    @staticmethod
    def apply(products: list[Product], gender: str = "", query: str = "") -> list[Product]:
        """条件に合う商品を元の順序で返す.

        Args:
            products: 商品一覧
            gender: "women" / "men" / "unisex"（空なら全件）
            query: 商品名の部分一致キーワード（大文字小文字を区別しない）
        """
        selected = (gender or "").strip().lower()
        keyword = (query or "").strip().lower()
        return [
            p
            for p in products
            if p.gender.matches(selected) and (not keyword or keyword in p.title.lower())
        ]
