"""Record shapes declared by the exercises."""

from .color import HSL, RGB, Color
from .movie import BoxOffice, Movie
from .product import Product
from .shapes import Ages, GameBoard, HighScore, Stuff
from .student import SkiSchoolStudent, SkillLevel, Sport

__all__ = [
    "BoxOffice",
    "Movie",
    "Product",
    "SkillLevel",
    "Sport",
    "SkiSchoolStudent",
    "RGB",
    "HSL",
    "Color",
    "Ages",
    "GameBoard",
    "HighScore",
    "Stuff",
]
