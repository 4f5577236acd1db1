"""
Record parsing and example values.
"""
from .parsers import (
    parse_box_office,
    parse_color,
    parse_movie,
    parse_product,
    parse_products,
    parse_student,
)
from .samples import CATS, DUNE, SAMPLE_PRODUCTS

__all__ = [
    "parse_box_office",
    "parse_color",
    "parse_movie",
    "parse_product",
    "parse_products",
    "parse_student",
    "CATS",
    "DUNE",
    "SAMPLE_PRODUCTS",
]
