"""Word validation and scoring rules for beehive puzzles."""

from .models import (
    Puzzle,
    ValidationOutcome,
    SubmissionResult,
    OutcomeCode,
    MIN_WORD_LENGTH,
    canonicalize,
)
from .validate import validate_word, has_bingo, missing_bingo_letters, found_starting_letters
from .scoring import PANGRAM_BONUS, score_word, total_score, total_possible_score
from .submit import submit_word, rejection_message, REJECTION_MESSAGES
from .levels import Level, LEVELS, current_level, next_level, level_progress
from .hints import letter_count_grid, two_letter_hints, render_letter_grid, render_two_letter_hints

__all__ = [
    # Models
    "Puzzle",
    "ValidationOutcome",
    "SubmissionResult",
    "OutcomeCode",
    "MIN_WORD_LENGTH",
    "canonicalize",
    # Validation
    "validate_word",
    "has_bingo",
    "missing_bingo_letters",
    "found_starting_letters",
    # Scoring
    "PANGRAM_BONUS",
    "score_word",
    "total_score",
    "total_possible_score",
    # Submission
    "submit_word",
    "rejection_message",
    "REJECTION_MESSAGES",
    # Levels
    "Level",
    "LEVELS",
    "current_level",
    "next_level",
    "level_progress",
    # Hints
    "letter_count_grid",
    "two_letter_hints",
    "render_letter_grid",
    "render_two_letter_hints",
]
