"""
Movie records for the profit exercise.

Records are frozen: ``title`` and every other field are fixed once the
record is constructed.
"""

from dataclasses import dataclass
from typing import Optional, Union

Amount = Union[int, float]


@dataclass(frozen=True)
class BoxOffice:
    """Box office figures in a single currency."""
    budget: Amount
    gross_us: Amount
    gross_worldwide: Amount


@dataclass(frozen=True)
class Movie:
    """A released movie and its box office results."""
    title: str
    director: str
    release_year: int
    box_office: BoxOffice
    original_title: Optional[str] = None    # Only set when it differs from title
