"""Product record used by the total price exercise."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A product with its unit price."""
    name: str
    price: float
