"""
Word validation for a single puzzle.

Checks run in a fixed order and the first failure is reported:
1. Already found (cheapest, most common during play)
2. Missing center letter
3. Too short
4. Letters outside the puzzle
5. Not in the puzzle's word list
"""

from typing import Iterable, List, Set

from .models import MIN_WORD_LENGTH, Puzzle, ValidationOutcome, canonicalize


def _found_set(found_words: Iterable[str]) -> Set[str]:
    return {canonicalize(w) for w in found_words}


def validate_word(raw_word: str, puzzle: Puzzle, found_words: Iterable[str] = ()) -> ValidationOutcome:
    """
    Decide whether a submitted word is legal for the puzzle.

    Args:
        raw_word: Word as typed by the player
        puzzle: The active puzzle
        found_words: Words already accepted for this puzzle

    Returns:
        A ValidationOutcome carrying the canonical word and the outcome code
    """
    word = canonicalize(raw_word)

    if word in _found_set(found_words):
        return ValidationOutcome(code="ALREADY_FOUND", word=word)

    if puzzle.center_letter not in word:
        return ValidationOutcome(code="MISSING_CENTER_LETTER", word=word)

    if len(word) < MIN_WORD_LENGTH:
        return ValidationOutcome(code="TOO_SHORT", word=word)

    if not set(word) <= puzzle.alphabet:
        return ValidationOutcome(code="INVALID_LETTERS", word=word)

    if not puzzle.has_word(word):
        return ValidationOutcome(code="NOT_IN_WORD_LIST", word=word)

    return ValidationOutcome(code="ACCEPTED", word=word)


def found_starting_letters(found_words: Iterable[str]) -> Set[str]:
    """First letters of every found word."""
    return {w[0] for w in _found_set(found_words) if w}


def missing_bingo_letters(puzzle: Puzzle, found_words: Iterable[str]) -> List[str]:
    """Puzzle letters (center first) that no found word starts with yet."""
    starts = found_starting_letters(found_words)
    return [letter for letter in puzzle.letters if letter not in starts]


def has_bingo(puzzle: Puzzle, found_words: Iterable[str]) -> bool:
    """True when every puzzle letter starts at least one found word."""
    return not missing_bingo_letters(puzzle, found_words)
