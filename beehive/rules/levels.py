"""Rank ladder based on the share of the total possible score."""

from typing import List, Optional
from pydantic import BaseModel, Field


class Level(BaseModel):
    name: str
    emoji: str
    threshold: float = Field(..., ge=0, le=1)


LEVELS: List[Level] = [
    Level(name="Seedling", emoji="🌱", threshold=0.1),
    Level(name="Sprout", emoji="🌿", threshold=0.25),
    Level(name="Budding", emoji="🪴", threshold=0.45),
    Level(name="Blooming", emoji="🌸", threshold=0.65),
    Level(name="Verdant", emoji="🌳", threshold=0.8),
    Level(name="Botanist", emoji="👩‍🌾", threshold=0.9),
]


def score_fraction(score: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return score / total


def current_level(score: int, total: int) -> Level:
    """Highest level reached; the first level until any threshold is met."""
    fraction = score_fraction(score, total)
    level = LEVELS[0]
    for candidate in LEVELS:
        if fraction >= candidate.threshold:
            level = candidate
    return level


def next_level(score: int, total: int) -> Optional[Level]:
    """Level after the current one, or None at the top of the ladder."""
    idx = LEVELS.index(current_level(score, total))
    return LEVELS[idx + 1] if idx < len(LEVELS) - 1 else None


def level_progress(score: int, total: int) -> float:
    """
    Progress from the current level's threshold towards the next one.

    1.0 at the top level, clamped to 0 below the first threshold.
    """
    current = current_level(score, total)
    upcoming = next_level(score, total)
    if upcoming is None:
        return 1.0
    fraction = score_fraction(score, total)
    progress = (fraction - current.threshold) / (upcoming.threshold - current.threshold)
    return max(0.0, min(1.0, progress))
