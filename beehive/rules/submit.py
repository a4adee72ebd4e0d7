"""Turns a submitted word into a scored, user-facing result."""

from typing import Dict, Iterable, Optional

from .models import OutcomeCode, Puzzle, SubmissionResult
from .scoring import PANGRAM_BONUS, score_word
from .validate import validate_word


# Rejection messages; {center} is the puzzle's center letter in uppercase
REJECTION_MESSAGES: Dict[OutcomeCode, str] = {
    "ALREADY_FOUND": "Already found",
    "MISSING_CENTER_LETTER": "Must use center letter ({center})",
    "TOO_SHORT": "Word must be at least 4 letters",
    "INVALID_LETTERS": "Can only use given letters",
    "NOT_IN_WORD_LIST": "Not a valid word",
}


def rejection_message(code: OutcomeCode, puzzle: Puzzle) -> str:
    return REJECTION_MESSAGES[code].format(center=puzzle.center_letter.upper())


def submit_word(
    raw_word: str,
    puzzle: Puzzle,
    found_words: Iterable[str] = (),
    pangram_bonus: Optional[int] = None,
) -> SubmissionResult:
    """
    Validate and score one submission.

    Does not touch any game state: the caller appends ``canonical_word``
    and adds ``points_awarded`` when ``accepted`` is true.

    Args:
        raw_word: Word as typed by the player
        puzzle: The active puzzle
        found_words: Words already accepted for this puzzle
        pangram_bonus: Override for the pangram bonus

    Returns:
        SubmissionResult describing the outcome
    """
    outcome = validate_word(raw_word, puzzle, found_words)

    if not outcome.accepted:
        return SubmissionResult(
            accepted=False,
            points_awarded=0,
            canonical_word=outcome.word,
            message=rejection_message(outcome.code, puzzle),
            message_kind="error",
            code=outcome.code,
        )

    is_pangram = puzzle.is_pangram(outcome.word)
    bonus = PANGRAM_BONUS if pangram_bonus is None else pangram_bonus
    points = score_word(outcome.word, is_pangram, bonus)
    message = f"Pangram! +{points} points" if is_pangram else f"+{points} points"

    return SubmissionResult(
        accepted=True,
        points_awarded=points,
        canonical_word=outcome.word,
        message=message,
        message_kind="success",
        code=outcome.code,
        is_pangram=is_pangram,
    )
