"""Tests for movie profit calculation"""

from exercises_app.calculations.movies import get_profit
from exercises_app.data.samples import CATS, DUNE
from exercises_app.models import BoxOffice, Movie


def _movie(budget, gross_worldwide):
    return Movie(
        title="Test",
        director="Someone",
        release_year=2000,
        box_office=BoxOffice(budget=budget, gross_us=0, gross_worldwide=gross_worldwide),
    )


class TestGetProfit:
    """Test get_profit"""

    def test_loss(self):
        """Cats lost money"""
        assert get_profit(CATS) == -21166652

    def test_profit(self, dune):
        """Dune made money"""
        assert get_profit(dune) == 400671789 - 165000000
        assert get_profit(DUNE) == get_profit(dune)

    def test_ignores_us_gross(self):
        """Only the worldwide gross counts"""
        movie = Movie(
            title="Test",
            director="Someone",
            release_year=2000,
            box_office=BoxOffice(budget=10, gross_us=1000, gross_worldwide=15),
        )
        assert get_profit(movie) == 5

    def test_break_even(self):
        """Equal gross and budget is zero profit"""
        assert get_profit(_movie(100, 100)) == 0

    def test_no_validation(self):
        """Negative figures are subtracted as given"""
        assert get_profit(_movie(-10, -30)) == -20

    def test_int_result_is_exact(self):
        """Integer figures give an exact integer"""
        result = get_profit(_movie(95000000, 73833348))
        assert isinstance(result, int)
        assert result == -21166652
