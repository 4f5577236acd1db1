"""Color records. A color is either RGB or HSL."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class RGB:
    """Red, green and blue components."""
    r: float
    g: float
    b: float


@dataclass(frozen=True)
class HSL:
    """Hue, saturation and lightness components."""
    h: float
    s: float
    l: float  # noqa: E741


Color = Union[RGB, HSL]
