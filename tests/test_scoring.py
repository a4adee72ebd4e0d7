"""Test word scoring and puzzle totals."""

import pytest

from beehive.rules import PANGRAM_BONUS, score_word, total_score, total_possible_score


class TestScoreWord:
    """Length-based scoring with a flat pangram bonus."""

    def test_four_letters_one_point(self):
        """A 4-letter word is worth 1."""
        assert score_word("gate", False) == 1

    def test_five_letters_scores_length(self):
        """A 5-letter word is worth 5."""
        assert score_word("grade", False) == 5

    @pytest.mark.parametrize("word,expected", [
        ("garden", 6),
        ("dangers", 7),
        ("gardener", 8),
    ])
    def test_longer_words_score_length(self, word, expected):
        """Longer words score one point per letter."""
        assert score_word(word) == expected

    def test_pangram_default_bonus(self):
        """Pangram adds the default bonus."""
        assert PANGRAM_BONUS == 7
        assert score_word("gardens", True) == 7 + PANGRAM_BONUS

    def test_pangram_custom_bonus(self):
        """The bonus is configurable."""
        assert score_word("gardens", True, pangram_bonus=10) == 17

    def test_bonus_ignored_for_non_pangram(self):
        """A custom bonus does nothing for ordinary words."""
        assert score_word("garden", False, pangram_bonus=10) == 6

    def test_never_fails_on_short_words(self):
        """Scoring is total; legality is the validator's job."""
        assert score_word("ace") == 1
        assert score_word("") == 1


class TestTotals:
    """Totals over word lists and puzzles."""

    def test_total_score(self):
        """Sum over words with pangram bonus applied once per pangram."""
        assert total_score(["gate", "grade", "gardens"], ["gardens"]) == 1 + 5 + 14

    def test_total_possible_score(self, garden_puzzle):
        """Every valid word found gives the total possible score."""
        expected = sum(score_word(w, w in garden_puzzle.pangrams) for w in garden_puzzle.valid_words)
        assert total_possible_score(garden_puzzle) == expected

    def test_total_possible_score_custom_bonus(self, garden_puzzle):
        """Two pangrams means the bonus difference counts twice."""
        default = total_possible_score(garden_puzzle)
        assert total_possible_score(garden_puzzle, pangram_bonus=10) == default + 2 * 3
