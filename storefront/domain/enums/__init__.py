"""列挙型モジュール."""
from .gender import Gender
from .load_status import LoadStatus

__all__ = [
    "Gender",
    "LoadStatus",
]
