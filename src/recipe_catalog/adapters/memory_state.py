"""Process-lifetime repositories for user state.

Each repository guards its collection with its own lock so every operation is
atomic with respect to that collection. Returned lists are copies.
"""

import threading
from collections import defaultdict
from dataclasses import dataclass, field

from recipe_catalog.domain.user_state import FavoriteEntry, MealPlanEntry
from recipe_catalog.services.user_state import (
    FavoritesRepository,
    MealPlanRepository,
    RatingRepository,
    SearchHistoryRepository,
    ShoppingListRepository,
)


@dataclass
class InMemoryFavoritesRepository(FavoritesRepository):
    """Favorites unique by recipe id, in insertion order."""

    entries: list[FavoriteEntry] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def add(self, entry: FavoriteEntry) -> list[FavoriteEntry]:
        with self._lock:
            if not any(existing.id == entry.id for existing in self.entries):
                self.entries.append(entry)
            return list(self.entries)

    def remove(self, recipe_id: int) -> list[FavoriteEntry]:
        with self._lock:
            self.entries = [entry for entry in self.entries if entry.id != recipe_id]
            return list(self.entries)

    def list_all(self) -> list[FavoriteEntry]:
        with self._lock:
            return list(self.entries)


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """Planned meals; duplicates are kept."""

    entries: list[MealPlanEntry] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def add(self, entry: MealPlanEntry) -> list[MealPlanEntry]:
        with self._lock:
            self.entries.append(entry)
            return list(self.entries)

    def remove(self, recipe_id: int, date: str) -> list[MealPlanEntry]:
        with self._lock:
            self.entries = [
                entry
                for entry in self.entries
                if not (entry.id == recipe_id and entry.date == date)
            ]
            return list(self.entries)

    def list_all(self) -> list[MealPlanEntry]:
        with self._lock:
            return list(self.entries)


@dataclass
class InMemoryShoppingListRepository(ShoppingListRepository):
    """Shopping items unique by exact value."""

    items: list[str] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def add_items(self, items: list[str]) -> list[str]:
        with self._lock:
            for item in items:
                if item not in self.items:
                    self.items.append(item)
            return list(self.items)

    def remove_at(self, index: int) -> list[str]:
        with self._lock:
            if 0 <= index < len(self.items):
                del self.items[index]
            return list(self.items)

    def list_all(self) -> list[str]:
        with self._lock:
            return list(self.items)


@dataclass
class InMemorySearchHistoryRepository(SearchHistoryRepository):
    """Recent searches, most recent first, without duplicates."""

    names: list[str] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def add(self, name: str, limit: int) -> list[str]:
        with self._lock:
            # Existing names keep their position.
            if name not in self.names:
                self.names.insert(0, name)
                del self.names[limit:]
            return list(self.names)

    def list_all(self) -> list[str]:
        with self._lock:
            return list(self.names)


@dataclass
class InMemoryRatingRepository(RatingRepository):
    """Scores per recipe id."""

    scores: defaultdict[int, list[int]] = field(
        default_factory=lambda: defaultdict(list)
    )
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def add(self, recipe_id: int, score: int) -> list[int]:
        with self._lock:
            self.scores[recipe_id].append(score)
            return list(self.scores[recipe_id])

    def get(self, recipe_id: int) -> list[int]:
        with self._lock:
            return list(self.scores.get(recipe_id, []))
