import random
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from ..rules.models import Puzzle


class LetterShuffler(BaseModel):
    """
    Reorders a puzzle's outer letters for display.

    Order never affects validation or scoring.

    Attributes:
        seed: Optional random seed for reproducible orderings
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    def shuffle(self, letters: List[str]) -> List[str]:
        """
        Return a random permutation of ``letters``.

        The input list is left untouched.
        """
        shuffled = list(letters)
        self._rng.shuffle(shuffled)
        return shuffled

    def shuffle_outer(self, puzzle: Puzzle) -> List[str]:
        """Shuffled outer letters of a puzzle."""
        return self.shuffle(puzzle.outer_letters)
