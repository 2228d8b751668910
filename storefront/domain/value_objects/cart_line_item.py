"""表示用のカート明細（投影結果）."""
from dataclasses import dataclass

from .money import Money


@dataclass(frozen=True)
class CartLineItem:
    """カタログと結合済みの表示用明細.

    描画のたびに再計算され、永続化されない。
    """

    product_id: str
    quantity: int
    title: str
    image_url: str
    unit_price: Money
    line_total: Money
