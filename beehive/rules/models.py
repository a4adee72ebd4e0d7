"""Data models for the puzzle rules engine."""

from datetime import date
from typing import Iterable, List, Optional, Literal, FrozenSet, Tuple
from pydantic import BaseModel, Field, ConfigDict, PrivateAttr, field_validator, model_validator


MIN_WORD_LENGTH = 4
OUTER_LETTER_COUNT = 6

OutcomeCode = Literal[
    "ACCEPTED",
    "ALREADY_FOUND",
    "MISSING_CENTER_LETTER",
    "TOO_SHORT",
    "INVALID_LETTERS",
    "NOT_IN_WORD_LIST",
]
MessageKind = Literal["error", "success"]


def canonicalize(word: str) -> str:
    """Canonical form used for every comparison: trimmed and lowercase."""
    return word.strip().lower()


def _dedupe(words: Iterable[str]) -> Tuple[str, ...]:
    seen = set()
    result = []
    for w in words:
        w = canonicalize(w)
        if w and w not in seen:
            seen.add(w)
            result.append(w)
    return tuple(result)


class Puzzle(BaseModel):
    """
    One daily puzzle record as supplied by the puzzle feed.

    Accepts the feed's field names (``outside_letters``, ``total_score``)
    as well as the attribute names. All letters and words are stored
    lowercase, and the letter and word collections are tuples, so a built
    puzzle cannot change. Construction fails if the record breaks its
    invariants.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1)
    scheduled_date: Optional[date] = None
    center_letter: str
    outer_letters: Tuple[str, ...] = Field(..., alias="outside_letters")
    valid_words: Tuple[str, ...] = ()
    pangrams: Tuple[str, ...] = ()
    total_possible_score: Optional[int] = Field(None, alias="total_score", ge=0)
    bingo_possible: Optional[bool] = None

    _word_set: FrozenSet[str] = PrivateAttr(default_factory=frozenset)
    _pangram_set: FrozenSet[str] = PrivateAttr(default_factory=frozenset)

    @field_validator("center_letter")
    @classmethod
    def validate_center_letter(cls, v: str) -> str:
        letter = canonicalize(v)
        if len(letter) != 1 or not letter.isalpha():
            raise ValueError(f"center_letter must be a single letter, got {v!r}")
        return letter

    @field_validator("outer_letters")
    @classmethod
    def validate_outer_letters(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        letters = tuple(canonicalize(l) for l in v)
        if len(letters) != OUTER_LETTER_COUNT:
            raise ValueError(f"expected {OUTER_LETTER_COUNT} outer letters, got {len(letters)}")
        for letter in letters:
            if len(letter) != 1 or not letter.isalpha():
                raise ValueError(f"outer letter must be a single letter, got {letter!r}")
        if len(set(letters)) != OUTER_LETTER_COUNT:
            raise ValueError(f"outer letters must be distinct: {letters}")
        return letters

    @field_validator("valid_words", "pangrams")
    @classmethod
    def normalize_words(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return _dedupe(v)

    @model_validator(mode="after")
    def check_invariants(self) -> "Puzzle":
        if self.center_letter in self.outer_letters:
            raise ValueError(f"center letter '{self.center_letter}' repeated in outer letters")

        alphabet = self.alphabet
        for word in self.valid_words:
            if len(word) < MIN_WORD_LENGTH:
                raise ValueError(f"valid word '{word}' is shorter than {MIN_WORD_LENGTH} letters")
            if self.center_letter not in word:
                raise ValueError(f"valid word '{word}' does not contain '{self.center_letter}'")
            if not set(word) <= alphabet:
                raise ValueError(f"valid word '{word}' uses letters outside the puzzle")

        word_set = set(self.valid_words)
        for word in self.pangrams:
            if word not in word_set:
                raise ValueError(f"pangram '{word}' is not in valid_words")
            if set(word) != alphabet:
                raise ValueError(f"pangram '{word}' does not use all seven letters")
        return self

    def model_post_init(self, __context) -> None:
        """Build lookup sets once the record is validated."""
        self._word_set = frozenset(self.valid_words)
        self._pangram_set = frozenset(self.pangrams)

    @property
    def alphabet(self) -> FrozenSet[str]:
        """The seven puzzle letters."""
        return frozenset([self.center_letter, *self.outer_letters])

    @property
    def letters(self) -> List[str]:
        """Center letter followed by the outer letters, in feed order."""
        return [self.center_letter, *self.outer_letters]

    def has_word(self, word: str) -> bool:
        return canonicalize(word) in self._word_set

    def is_pangram(self, word: str) -> bool:
        return canonicalize(word) in self._pangram_set


class ValidationOutcome(BaseModel):
    """Result of checking one submitted word against a puzzle."""
    code: OutcomeCode
    word: str = ""

    @property
    def accepted(self) -> bool:
        return self.code == "ACCEPTED"


class SubmissionResult(BaseModel):
    """Everything the caller needs to apply (or report) one submission."""
    accepted: bool
    points_awarded: int = Field(0, ge=0)
    canonical_word: str = ""
    message: str
    message_kind: MessageKind
    code: OutcomeCode
    is_pangram: bool = False
