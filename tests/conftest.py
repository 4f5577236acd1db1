"""Pytest configuration and shared fixtures."""

import pytest
from typing import Dict, Any

from exercises_app.models import BoxOffice, Movie, Product


@pytest.fixture
def cats_raw() -> Dict[str, Any]:
    """The "Cats" literal in its camelCase form."""
    return {
        "title": "Cats",
        "director": "Tom Hooper",
        "releaseYear": 2019,
        "boxOffice": {
            "budget": 95000000,
            "grossUS": 27166770,
            "grossWorldwide": 73833348,
        },
    }


@pytest.fixture
def dune() -> Movie:
    """Dune, a profitable movie with an original title."""
    return Movie(
        title="Dune",
        original_title="Dune Part One",
        director="Denis Villeneuve",
        release_year=2021,
        box_office=BoxOffice(
            budget=165000000,
            gross_us=108327830,
            gross_worldwide=400671789,
        ),
    )


@pytest.fixture
def products() -> list[Product]:
    """Sample products totalling 61.44."""
    return [
        Product(name="coffee mug", price=11.50),
        Product(name="printer", price=29.99),
        Product(name="keyboard", price=19.95),
    ]
