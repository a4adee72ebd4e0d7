"""
JSON file store for per-puzzle game state.

Used by the command-line application; the rules engine never reads or
writes state itself.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Union

from .models import GameState

logger = logging.getLogger(__name__)


class JsonStateStore:
    """One JSON document mapping puzzle id to saved GameState."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, dict]:
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            return json.load(f)

    def read(self, puzzle_id: str) -> GameState:
        """Saved state for a puzzle, or a fresh empty state."""
        data = self._read_all().get(puzzle_id)
        if data is None:
            return GameState(puzzle_id=puzzle_id)
        return GameState.model_validate(data)

    def write(self, state: GameState) -> None:
        """
        Save one puzzle's state, keeping every other puzzle's entry.

        The document is written to a sibling temp file and then moved over
        the old one, so an interrupted write leaves the previous file intact.
        """
        data = self._read_all()
        data[state.puzzle_id] = state.model_dump()

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp_path, 'w', encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            tmp_path.replace(self.path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.info(
            "Saved %s: %d words, score %d", state.puzzle_id, len(state.found_words), state.score
        )
