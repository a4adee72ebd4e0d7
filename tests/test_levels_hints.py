"""Test rank levels and hint grids."""

import pytest

from beehive.rules import (
    LEVELS,
    current_level,
    next_level,
    level_progress,
    letter_count_grid,
    two_letter_hints,
    render_letter_grid,
    render_two_letter_hints,
)


class TestLevels:
    """Levels follow the share of the total possible score."""

    @pytest.mark.parametrize("score,name", [
        (0, "Seedling"),
        (9, "Seedling"),
        (10, "Seedling"),
        (25, "Sprout"),
        (44, "Sprout"),
        (45, "Budding"),
        (65, "Blooming"),
        (80, "Verdant"),
        (90, "Botanist"),
        (100, "Botanist"),
    ])
    def test_current_level(self, score, name):
        """Each score lands on the highest threshold it reaches."""
        assert current_level(score, 100).name == name

    def test_thresholds_ascending(self):
        """The ladder is ordered from lowest to highest."""
        thresholds = [level.threshold for level in LEVELS]
        assert thresholds == sorted(thresholds)

    def test_next_level(self):
        """The next rank is reported until the top is reached."""
        assert next_level(0, 100).name == "Sprout"
        assert next_level(95, 100) is None

    def test_progress(self):
        """Halfway between Sprout (25%) and Budding (45%)."""
        assert level_progress(35, 100) == pytest.approx(0.5)

    def test_progress_at_top(self):
        """The top rank reports full progress."""
        assert level_progress(100, 100) == 1.0

    def test_progress_below_first_threshold(self):
        """No score means no progress."""
        assert level_progress(0, 100) == 0.0

    def test_zero_total(self):
        """A puzzle with no score available stays at the first level."""
        assert current_level(0, 0).name == "Seedling"
        assert level_progress(0, 0) == 0.0


class TestHints:
    """Hints count only the words not found yet."""

    WORDS = ["grade", "gardens", "grand", "sand", "sane", "anger"]

    def test_letter_count_grid(self):
        """Unfound words are counted by first letter and length."""
        grid = letter_count_grid(self.WORDS, ["grand"])
        assert grid == {
            "G": {5: 1, 7: 1},
            "S": {4: 2},
            "A": {5: 1},
        }

    def test_found_words_case_insensitive(self):
        """Found words are matched regardless of case."""
        grid = letter_count_grid(self.WORDS, ["GRADE", "Gardens"])
        assert "G" in grid and grid["G"] == {5: 1}

    def test_everything_found(self):
        """Nothing is left to hint once every word is found."""
        assert letter_count_grid(self.WORDS, self.WORDS) == {}
        assert two_letter_hints(self.WORDS, self.WORDS) == {}

    def test_two_letter_hints(self):
        """Unfound words are counted by their first two letters."""
        assert two_letter_hints(self.WORDS, []) == {"GR": 2, "GA": 1, "SA": 2, "AN": 1}

    def test_accepts_puzzle_tuples(self, garden_puzzle):
        """A puzzle's word tuple works as the word source."""
        grid = letter_count_grid(garden_puzzle.valid_words, [])
        assert sum(sum(row.values()) for row in grid.values()) == len(garden_puzzle.valid_words)

    def test_render_letter_grid(self):
        """Rows are sorted by letter with length columns and totals."""
        text = render_letter_grid(letter_count_grid(self.WORDS, []))
        lines = text.split("\n")
        assert lines[0].split() == ["4", "5", "7", "Σ"]
        assert lines[1].split() == ["A:", "-", "1", "-", "1"]
        assert lines[2].split() == ["G:", "-", "2", "1", "3"]
        assert lines[3].split() == ["S:", "2", "-", "-", "2"]
        assert lines[-1].split() == ["Σ:", "2", "3", "1", "6"]

    def test_render_empty_grid(self):
        """An empty grid renders as an empty string."""
        assert render_letter_grid({}) == ""

    def test_render_two_letter_hints(self):
        """Prefixes are grouped by first letter, one line per group."""
        text = render_two_letter_hints({"GR": 2, "GA": 1, "SA": 2, "AN": 1})
        assert text.split("\n") == ["AN-1", "GA-1 GR-2", "SA-2"]
