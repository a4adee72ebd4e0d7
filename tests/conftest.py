import pytest

from beehive.rules import Puzzle


GARDEN_WORDS = [
    "gardens", "dangers", "grade", "grades", "grand", "sand", "sane", "read",
    "dare", "earn", "near", "rage", "range", "anger", "angers", "aged", "drag",
]


@pytest.fixture
def garden_puzzle() -> Puzzle:
    """Puzzle over G A R D E N S with center A."""
    return Puzzle(
        id="garden",
        center_letter="A",
        outside_letters=["G", "R", "D", "E", "N", "S"],
        valid_words=GARDEN_WORDS,
        pangrams=["gardens", "dangers"],
    )


@pytest.fixture
def house_puzzle() -> Puzzle:
    """Puzzle over H O U S E M T with center H and no pangram."""
    return Puzzle(
        id="house",
        center_letter="h",
        outer_letters=["o", "u", "s", "e", "m", "t"],
        valid_words=["mouth", "house", "those", "hose", "shoe", "theme", "ethos"],
        pangrams=[],
    )
