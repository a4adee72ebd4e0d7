"""
Word scoring.

Scoring rules:
- A 4-letter word is worth 1 point.
- A word of 5 or more letters is worth one point per letter.
- A pangram earns a flat bonus on top of its length score.
"""

from typing import Iterable, Optional

from .models import MIN_WORD_LENGTH, Puzzle


# Flat bonus added to a pangram's score
PANGRAM_BONUS = 7


def score_word(word: str, is_pangram: bool = False, pangram_bonus: int = PANGRAM_BONUS) -> int:
    """
    Score a single word.

    Never rejects: a word shorter than the minimum still scores its
    flat single point, since legality is decided by the validator.

    Args:
        word: Canonical word
        is_pangram: Whether the word uses all seven puzzle letters
        pangram_bonus: Bonus to add for pangrams

    Returns:
        Points awarded for the word
    """
    length = len(word)
    points = 1 if length <= MIN_WORD_LENGTH else length
    if is_pangram:
        points += pangram_bonus
    return points


def total_score(
    words: Iterable[str],
    pangrams: Iterable[str] = (),
    pangram_bonus: int = PANGRAM_BONUS,
) -> int:
    """Sum of word scores over a word list."""
    pangram_set = set(pangrams)
    return sum(score_word(w, w in pangram_set, pangram_bonus) for w in words)


def total_possible_score(puzzle: Puzzle, pangram_bonus: Optional[int] = None) -> int:
    """Maximum score for a puzzle: every valid word found."""
    bonus = PANGRAM_BONUS if pangram_bonus is None else pangram_bonus
    return total_score(puzzle.valid_words, puzzle.pangrams, bonus)
