"""Hint grids built from the words a player has not found yet."""

from typing import Dict, Iterable, List

from .models import canonicalize


LetterCountGrid = Dict[str, Dict[int, int]]


def unfound_words(valid_words: Iterable[str], found_words: Iterable[str]) -> List[str]:
    found = {canonicalize(w) for w in found_words}
    return [w for w in valid_words if canonicalize(w) not in found]


def letter_count_grid(valid_words: Iterable[str], found_words: Iterable[str]) -> LetterCountGrid:
    """Count unfound words by uppercase first letter and by length."""
    grid: LetterCountGrid = {}
    for word in unfound_words(valid_words, found_words):
        row = grid.setdefault(word[0].upper(), {})
        row[len(word)] = row.get(len(word), 0) + 1
    return grid


def two_letter_hints(valid_words: Iterable[str], found_words: Iterable[str]) -> Dict[str, int]:
    """Count unfound words by their uppercase two-letter prefix."""
    counts: Dict[str, int] = {}
    for word in unfound_words(valid_words, found_words):
        if len(word) >= 2:
            prefix = word[:2].upper()
            counts[prefix] = counts.get(prefix, 0) + 1
    return counts


def render_letter_grid(grid: LetterCountGrid) -> str:
    """Render the letter/length grid as a text table with totals."""
    if not grid:
        return ""

    letters = sorted(grid)
    lengths = sorted({length for row in grid.values() for length in row})

    def cell(value: int) -> str:
        return f"{value:>3}" if value else "  -"

    lines = ["   " + "".join(f"{n:>3}" for n in lengths) + "  Σ"]
    for letter in letters:
        row = grid[letter]
        lines.append(
            f"{letter}: " + "".join(cell(row.get(n, 0)) for n in lengths) + f"{sum(row.values()):>3}"
        )
    column_totals = [sum(grid[l].get(n, 0) for l in letters) for n in lengths]
    lines.append("Σ: " + "".join(cell(t) for t in column_totals) + f"{sum(column_totals):>3}")

    return '\n'.join(lines)


def render_two_letter_hints(counts: Dict[str, int]) -> str:
    """Render prefixes grouped by first letter, e.g. ``GA-2 GR-1``."""
    by_letter: Dict[str, List[str]] = {}
    for prefix in sorted(counts):
        by_letter.setdefault(prefix[0], []).append(f"{prefix}-{counts[prefix]}")
    return '\n'.join(' '.join(items) for _, items in sorted(by_letter.items()))
