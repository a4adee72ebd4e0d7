"""
Puzzle catalog: the preloaded puzzle collection and daily selection.

Two selection modes:
- rotation: the puzzle index is days-since-epoch modulo catalog size,
  so every date maps to a puzzle and the catalog repeats once exhausted.
- scheduled: each puzzle carries a date; a date with no puzzle falls
  forward to the nearest scheduled one, or back to the last one.
"""

import json
import logging
from bisect import bisect_right
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import List, Optional, Union
from pydantic import BaseModel, Field, PrivateAttr, model_validator

from ..rules.models import Puzzle
from ..rules.scoring import PANGRAM_BONUS, total_possible_score
from ..rules.validate import has_bingo
from .models import CatalogMode, GameConfig

logger = logging.getLogger(__name__)

EPOCH = date(1970, 1, 1)
ONE_DAY = timedelta(days=1)
DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "puzzles.json"

DateLike = Union[date, datetime]


def to_local_date(when: Optional[DateLike] = None) -> date:
    """
    Truncate a date or datetime to the local calendar day.

    Aware datetimes are converted to local time first; naive datetimes
    are taken to already be local.
    """
    if when is None:
        return date.today()
    if isinstance(when, datetime):
        if when.tzinfo is not None:
            when = when.astimezone()
        return when.date()
    return when


def days_since_epoch(when: Optional[DateLike] = None) -> int:
    """Whole calendar days between 1970-01-01 and the local date of ``when``."""
    return (to_local_date(when) - EPOCH).days


def next_rollover(now: Optional[datetime] = None) -> datetime:
    """
    Local midnight at the start of the day after ``now``.

    ``now`` is normalised to a local date exactly as ``resolve`` does, and
    the result always carries the local offset in effect at that midnight.
    """
    day = to_local_date(now)
    return datetime.combine(day + ONE_DAY, time.min).astimezone()


def time_until_rollover(now: Optional[datetime] = None) -> timedelta:
    """Time left before the next puzzle goes live; naive ``now`` is local."""
    now = datetime.now().astimezone() if now is None else now.astimezone()
    return next_rollover(now) - now


class PuzzleCatalog(BaseModel):
    """
    Fixed, preloaded collection of puzzles.

    Attributes:
        puzzles: Puzzles in feed order (rotation index order)
        mode: Date-driven selection mode
        fixed_index: When set, every date resolves to this index
    """

    puzzles: List[Puzzle] = Field(..., min_length=1)
    mode: CatalogMode = "rotation"
    fixed_index: Optional[int] = Field(None, ge=0)

    _schedule: List[Puzzle] = PrivateAttr(default_factory=list)
    _schedule_dates: List[date] = PrivateAttr(default_factory=list)

    def model_post_init(self, __context) -> None:
        # undated puzzles are rejected by check_catalog
        if self.mode == "scheduled":
            dated = [p for p in self.puzzles if p.scheduled_date is not None]
            self._schedule = sorted(dated, key=lambda p: p.scheduled_date)
            self._schedule_dates = [p.scheduled_date for p in self._schedule]

    @model_validator(mode="after")
    def check_catalog(self) -> "PuzzleCatalog":
        if self.fixed_index is not None and self.fixed_index >= len(self.puzzles):
            raise ValueError(
                f"fixed_index {self.fixed_index} out of range for {len(self.puzzles)} puzzles"
            )
        if self.mode == "scheduled":
            undated = [p.id for p in self.puzzles if p.scheduled_date is None]
            if undated:
                raise ValueError(f"scheduled mode requires dates; missing for {undated}")
        ids = [p.id for p in self.puzzles]
        if len(set(ids)) != len(ids):
            raise ValueError("puzzle ids must be unique")
        return self

    @classmethod
    def load(
        cls,
        path: Optional[Union[str, Path]] = None,
        mode: CatalogMode = "rotation",
        fixed_index: Optional[int] = None,
        pangram_bonus: int = PANGRAM_BONUS,
    ) -> "PuzzleCatalog":
        """
        Load a catalog from a JSON feed.

        ``total_score`` and ``bingo_possible`` are recomputed from each
        puzzle's words; a feed value that disagrees is logged and replaced.

        Args:
            path: JSON file holding a list of puzzle records (or an object
                with a ``puzzles`` list); defaults to the bundled catalog
            mode: Selection mode
            fixed_index: Optional fixed puzzle index
            pangram_bonus: Bonus used when recomputing total scores

        Returns:
            A validated PuzzleCatalog
        """
        path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
        if not path.exists():
            raise FileNotFoundError(f"Puzzle catalog not found: {path}")

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        records = data["puzzles"] if isinstance(data, dict) else data

        puzzles = [with_derived_fields(Puzzle.model_validate(r), pangram_bonus) for r in records]
        logger.info("Loaded %d puzzles from %s (%s mode)", len(puzzles), path, mode)
        return cls(puzzles=puzzles, mode=mode, fixed_index=fixed_index)

    @classmethod
    def from_config(cls, config: GameConfig) -> "PuzzleCatalog":
        """Build the catalog described by a GameConfig."""
        fixed_index = config.fixed_index
        if fixed_index is not None and not config.allows_override:
            logger.warning(
                "Ignoring fixed_index=%d in %s environment", fixed_index, config.environment
            )
            fixed_index = None
        return cls.load(
            config.catalog_path,
            mode=config.mode,
            fixed_index=fixed_index,
            pangram_bonus=config.pangram_bonus,
        )

    def __len__(self) -> int:
        return len(self.puzzles)

    def get(self, puzzle_id: str) -> Puzzle:
        """Look up a puzzle by id; raises KeyError if absent."""
        for puzzle in self.puzzles:
            if puzzle.id == puzzle_id:
                return puzzle
        raise KeyError(puzzle_id)

    def index_for(self, when: Optional[DateLike] = None) -> int:
        """Rotation index for a date."""
        return days_since_epoch(when) % len(self.puzzles)

    def resolve(self, when: Optional[DateLike] = None) -> Puzzle:
        """
        The puzzle live on the local calendar day of ``when`` (today if None).

        Always returns a puzzle.
        """
        if self.fixed_index is not None:
            return self.puzzles[self.fixed_index]
        if self.mode == "scheduled":
            return self._resolve_scheduled(to_local_date(when))
        return self.puzzles[self.index_for(when)]

    def yesterday(self, when: Optional[DateLike] = None) -> Puzzle:
        """The puzzle of the day before ``when``."""
        return self.resolve(to_local_date(when) - ONE_DAY)

    def next_rollover_instant(self, now: Optional[datetime] = None) -> datetime:
        """Instant at which ``resolve`` moves on to the next day."""
        return next_rollover(now)

    def _resolve_scheduled(self, day: date) -> Puzzle:
        pos = bisect_right(self._schedule_dates, day)
        if pos > 0 and self._schedule_dates[pos - 1] == day:
            return self._schedule[pos - 1]
        if pos < len(self._schedule):
            return self._schedule[pos]
        return self._schedule[-1]


def with_derived_fields(puzzle: Puzzle, pangram_bonus: int = PANGRAM_BONUS) -> Puzzle:
    """Copy of ``puzzle`` with total score and bingo flag computed from its words."""
    total = total_possible_score(puzzle, pangram_bonus)
    bingo = has_bingo(puzzle, puzzle.valid_words)

    if puzzle.total_possible_score is not None and puzzle.total_possible_score != total:
        logger.warning(
            "Puzzle %s: feed total_score %d != computed %d, using computed",
            puzzle.id, puzzle.total_possible_score, total,
        )
    if puzzle.bingo_possible is not None and puzzle.bingo_possible != bingo:
        logger.warning(
            "Puzzle %s: feed bingo_possible %s != computed %s, using computed",
            puzzle.id, puzzle.bingo_possible, bingo,
        )
    return puzzle.model_copy(update={"total_possible_score": total, "bingo_possible": bingo})
