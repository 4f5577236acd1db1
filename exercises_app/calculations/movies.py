"""Movie profit calculation"""

from typing import Union

from ..models import Movie


def get_profit(movie: Movie) -> Union[int, float]:
    """
    Calculate a movie's profit.

    profit = worldwide gross - budget

    Args:
        movie: Movie with box office figures

    Returns:
        Signed profit, negative when the movie lost money
    """
    box_office = movie.box_office
    return box_office.gross_worldwide - box_office.budget
