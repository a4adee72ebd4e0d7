"""
Pydantic models for the environment layer.

Holds the run configuration and the per-puzzle game state shape. The
catalog, shuffler and state store classes live in their own modules.
"""

from datetime import datetime
from typing import List, Optional, Literal
from pydantic import BaseModel, Field

from ..rules.models import SubmissionResult, canonicalize
from ..rules.scoring import PANGRAM_BONUS


# Type aliases
CatalogMode = Literal["rotation", "scheduled"]
Environment = Literal["production", "development", "test"]
SortMode = Literal["chronological", "alphabetical", "length"]


class GameConfig(BaseModel):
    """Configuration for a game run."""
    catalog_path: Optional[str] = None  # None means the bundled catalog
    mode: CatalogMode = "rotation"
    fixed_index: Optional[int] = Field(None, ge=0)
    environment: Environment = "production"
    pangram_bonus: int = Field(PANGRAM_BONUS, ge=0)
    state_path: str = "state/progress.json"
    seed: Optional[int] = None

    @property
    def allows_override(self) -> bool:
        """Whether a fixed puzzle index may replace date-driven selection."""
        return self.environment in ("development", "test")


class GameState(BaseModel):
    """
    A player's progress on one puzzle.

    ``found_words`` keeps acceptance order. ``score`` is only ever
    incremented by recorded submissions.
    """
    puzzle_id: str
    found_words: List[str] = Field(default_factory=list)
    score: int = Field(0, ge=0)
    last_updated: Optional[str] = None

    def has_found(self, word: str) -> bool:
        return canonicalize(word) in self.found_words

    def record(self, result: SubmissionResult) -> bool:
        """
        Apply an accepted submission.

        Returns:
            True if the word was appended, False if the result was a
            rejection or the word is already present
        """
        if not result.accepted or self.has_found(result.canonical_word):
            return False
        self.found_words.append(result.canonical_word)
        self.score += result.points_awarded
        self.last_updated = datetime.now().isoformat()
        return True

    def sorted_words(self, mode: SortMode = "chronological") -> List[str]:
        """Found words in display order."""
        if mode == "alphabetical":
            return sorted(self.found_words)
        if mode == "length":
            return sorted(self.found_words, key=len, reverse=True)
        return list(self.found_words)
