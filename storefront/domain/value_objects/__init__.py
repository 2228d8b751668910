"""値オブジェクトモジュール."""
from .cart_line import CartLine
from .cart_line_item import CartLineItem
from .cart_totals import CartTotals
from .checkout_details import CheckoutDetails
from .email import Email
from .money import Money
from .quantity import Quantity

__all__ = [
    "CartLine",
    "CartLineItem",
    "CartTotals",
    "CheckoutDetails",
    "Email",
    "Money",
    "Quantity",
]
