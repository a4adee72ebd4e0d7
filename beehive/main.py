"""
Main entry point for playing the daily beehive puzzle.

Usage:
    python -m beehive.main
    python -m beehive.main config.yaml --word grade --word gardens
    python -m beehive.main --date 2025-06-01 --hints
    python -m beehive.main --yesterday
"""

import argparse
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, Optional

import yaml

from .environment import (
    GameConfig,
    GameState,
    JsonStateStore,
    LetterShuffler,
    PuzzleCatalog,
    time_until_rollover,
)
from .rules import (
    Puzzle,
    current_level,
    has_bingo,
    letter_count_grid,
    missing_bingo_letters,
    render_letter_grid,
    render_two_letter_hints,
    submit_word,
    two_letter_hints,
)


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """Load game configuration from a YAML file (defaults when no path)."""
    if config_path is None:
        return GameConfig()

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def format_letters(puzzle: Puzzle, outer: Iterable[str]) -> str:
    """Center letter in brackets, then the outer letters."""
    return f"[{puzzle.center_letter.upper()}] " + " ".join(l.upper() for l in outer)


def print_summary(puzzle: Puzzle, state: GameState) -> None:
    total = puzzle.total_possible_score or 0
    level = current_level(state.score, total)

    print()
    print("=== Puzzle Summary ===")
    print(f"Puzzle: {puzzle.id}")
    print(f"Score: {state.score}/{total} ({level.emoji} {level.name})")
    print(f"Words found: {len(state.found_words)}/{len(puzzle.valid_words)}")
    if state.found_words:
        print("Found: " + ", ".join(state.sorted_words("alphabetical")))
    if has_bingo(puzzle, state.found_words):
        print("Bingo! Every letter starts a found word.")
    elif puzzle.bingo_possible:
        missing = missing_bingo_letters(puzzle, state.found_words)
        print("Bingo still needs: " + " ".join(l.upper() for l in missing))

    remaining = time_until_rollover()
    hours, rest = divmod(int(remaining.total_seconds()), 3600)
    print(f"Next puzzle in {hours}h {rest // 60:02d}m")


def print_yesterday(puzzle: Puzzle) -> None:
    print(f"Yesterday's puzzle: {puzzle.id}")
    print(f"Letters: {format_letters(puzzle, puzzle.outer_letters)}")
    print(f"Pangrams: {', '.join(puzzle.pangrams) or '(none)'}")
    print(f"Words ({len(puzzle.valid_words)}): {', '.join(sorted(puzzle.valid_words))}")


def play(
    puzzle: Puzzle,
    state: GameState,
    words: Iterable[str],
    store: JsonStateStore,
    pangram_bonus: int,
) -> None:
    """Submit each word and persist every accepted one."""
    for raw in words:
        result = submit_word(raw, puzzle, state.found_words, pangram_bonus=pangram_bonus)
        marker = "✓" if result.accepted else "✗"
        print(f"{marker} {result.canonical_word.upper() or '(empty)'}: {result.message}")
        if state.record(result):
            store.write(state)


def read_words(shuffler: LetterShuffler, puzzle: Puzzle) -> Iterable[str]:
    """Prompt for words until EOF or a blank line; ``!`` reshuffles."""
    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            return
        if not line:
            return
        if line == "!":
            print(format_letters(puzzle, shuffler.shuffle_outer(puzzle)))
            continue
        yield line


def main():
    parser = argparse.ArgumentParser(
        description="Play the daily beehive word puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  mode: rotation
  pangram_bonus: 7
  state_path: state/progress.json
  environment: development
  fixed_index: 2
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used when omitted)"
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        help="Play the puzzle for this date (YYYY-MM-DD) instead of today"
    )
    parser.add_argument(
        "--word", "-w",
        action="append",
        default=[],
        help="Word to submit (repeatable); reads from stdin when omitted"
    )
    parser.add_argument(
        "--yesterday",
        action="store_true",
        help="Show yesterday's puzzle and its answers"
    )
    parser.add_argument(
        "--hints",
        action="store_true",
        help="Print the letter/length grid and two-letter hints"
    )
    parser.add_argument(
        "--shuffle",
        action="store_true",
        help="Shuffle the outer letters before display"
    )
    parser.add_argument(
        "--state",
        help="Path to the saved state JSON (overrides state_path)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log catalog and state activity"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        catalog = PuzzleCatalog.from_config(config)
    except Exception as e:
        print(f"Error loading puzzles: {e}", file=sys.stderr)
        sys.exit(1)

    when = args.date or datetime.now()

    if args.yesterday:
        print_yesterday(catalog.yesterday(when))
        return 0

    puzzle = catalog.resolve(when)
    store = JsonStateStore(args.state or config.state_path)
    shuffler = LetterShuffler(seed=config.seed)

    try:
        state = store.read(puzzle.id)
    except Exception as e:
        print(f"Error reading saved state: {e}", file=sys.stderr)
        sys.exit(1)

    outer = shuffler.shuffle_outer(puzzle) if args.shuffle else puzzle.outer_letters
    print(f"Puzzle {puzzle.id}: {format_letters(puzzle, outer)}")

    if args.hints:
        grid = letter_count_grid(puzzle.valid_words, state.found_words)
        print(render_letter_grid(grid))
        print()
        print(render_two_letter_hints(two_letter_hints(puzzle.valid_words, state.found_words)))

    words = args.word or read_words(shuffler, puzzle)
    try:
        play(puzzle, state, words, store, config.pangram_bonus)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
    except OSError as e:
        print(f"Error saving state: {e}", file=sys.stderr)
        sys.exit(1)

    print_summary(puzzle, state)
    return 0


if __name__ == "__main__":
    sys.exit(main())
