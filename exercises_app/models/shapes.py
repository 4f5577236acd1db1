"""
Type aliases from the array and union exercises.

``Stuff`` is a list of strings or a list of numbers, never a mix of both.
"""

from typing import Union

Ages = list[int]
GameBoard = list[list[str]]
HighScore = Union[int, bool]
Stuff = Union[list[str], list[float]]
