"""Product price totals"""

from collections.abc import Iterable
from typing import Optional, Union

from ..config.defaults import OutputParams
from ..models import Product

_DEFAULT_OUTPUT = OutputParams()


def get_total(products: Iterable[Product]) -> Union[int, float]:
    """
    Sum the prices of all products.

    Args:
        products: Products to total, may be empty

    Returns:
        Sum of prices, 0 for no products
    """
    total = 0
    for product in products:
        total += product.price
    return total


def format_total(total: Union[int, float], params: Optional[OutputParams] = None) -> str:
    """Render a total as e.g. ``Total Price: $61.44``."""
    params = params or _DEFAULT_OUTPUT
    return f"{params.total_label}: {params.currency_symbol}{total:.{params.decimal_places}f}"
