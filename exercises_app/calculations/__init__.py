"""Pure calculations behind the exercises"""

from .age import AgeGroup, age_group, classify_age
from .movies import get_profit
from .products import format_total, get_total

__all__ = [
    "AgeGroup",
    "age_group",
    "classify_age",
    "get_profit",
    "get_total",
    "format_total",
]
