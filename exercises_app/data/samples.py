"""Example values used by the exercises and the demo."""

from ..models import Ages, BoxOffice, Color, GameBoard, Movie, Product

DUNE = Movie(
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

CATS = Movie(
    title="Cats",
    director="Tom Hooper",
    release_year=2019,
    box_office=BoxOffice(
        budget=95000000,
        gross_us=27166770,
        gross_worldwide=73833348,
    ),
)

SAMPLE_PRODUCTS = (
    Product(name="coffee mug", price=11.50),
    Product(name="printer", price=29.99),
    Product(name="keyboard", price=19.95),
)

DEMO_AGES = (15, 35, 70)
DEMO_NAMES = ("Sam", "Lee")

# Empty containers typed by the array and union exercises
AGES: Ages = []
GAME_BOARD: GameBoard = []
COLORS: list[Color] = []
