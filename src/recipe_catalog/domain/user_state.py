"""Domain models for per-process user state."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FavoriteEntry:
    """Favorited recipe."""

    id: int
    title: str


@dataclass(frozen=True)
class MealPlanEntry:
    """Recipe planned for a date."""

    id: int
    title: str
    date: str
