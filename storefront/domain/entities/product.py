"""カタログ商品エンティティ."""
from dataclasses import dataclass

from ..enums import Gender
from ..value_objects import Money


@dataclass(frozen=True)
class Product:
    """外部カタログから取得した商品.

    ページの生存期間中は不変のスナップショットとして扱う。
    """

    id: str
    title: str
    price: Money
    image_url: str = ""
    gender: Gender = Gender.UNISEX
    description: str = ""

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.id:
            raise ValueError("Product id cannot be empty")
