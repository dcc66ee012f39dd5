"""Favorites, meal plan, shopping list, search history and ratings."""

from dataclasses import dataclass
from typing import Protocol

from recipe_catalog.domain.errors import ValidationError
from recipe_catalog.domain.recipes import split_ingredients
from recipe_catalog.domain.user_state import FavoriteEntry, MealPlanEntry
from recipe_catalog.services.recipe_store import RecipeStore

DEFAULT_HISTORY_LIMIT = 5


class FavoritesRepository(Protocol):
    """Storage interface for favorite recipes."""

    def add(self, entry: FavoriteEntry) -> list[FavoriteEntry]:
        """Append the entry unless its recipe id is already present."""

    def remove(self, recipe_id: int) -> list[FavoriteEntry]:
        """Remove the entry for a recipe id, if any."""

    def list_all(self) -> list[FavoriteEntry]:
        """Return favorites in insertion order."""


class MealPlanRepository(Protocol):
    """Storage interface for planned meals."""

    def add(self, entry: MealPlanEntry) -> list[MealPlanEntry]:
        """Append the entry."""

    def remove(self, recipe_id: int, date: str) -> list[MealPlanEntry]:
        """Remove every entry matching the recipe id and date."""

    def list_all(self) -> list[MealPlanEntry]:
        """Return planned meals in insertion order."""


class ShoppingListRepository(Protocol):
    """Storage interface for shopping list items."""

    def add_items(self, items: list[str]) -> list[str]:
        """Append items not already on the list."""

    def remove_at(self, index: int) -> list[str]:
        """Remove the item at a position; out-of-range positions are ignored."""

    def list_all(self) -> list[str]:
        """Return items in first-insertion order."""


class SearchHistoryRepository(Protocol):
    """Storage interface for recent recipe searches."""

    def add(self, name: str, limit: int) -> list[str]:
        """Prepend a new name and keep at most `limit` entries."""

    def list_all(self) -> list[str]:
        """Return names, most recent first."""


class RatingRepository(Protocol):
    """Storage interface for recipe ratings."""

    def add(self, recipe_id: int, score: int) -> list[int]:
        """Record a score and return all scores for the recipe."""

    def get(self, recipe_id: int) -> list[int]:
        """Return all scores for the recipe."""


@dataclass
class UserStateService:
    """Application service for user-owned collections."""

    store: RecipeStore
    favorites: FavoritesRepository
    meal_plan: MealPlanRepository
    shopping_list: ShoppingListRepository
    search_history: SearchHistoryRepository
    ratings: RatingRepository
    history_limit: int = DEFAULT_HISTORY_LIMIT

    def add_favorite(self, recipe_id: int) -> list[FavoriteEntry]:
        """Favorite a recipe; unknown ids are ignored."""
        recipe = self.store.get_by_id(recipe_id)
        if recipe is None:
            return self.favorites.list_all()
        return self.favorites.add(FavoriteEntry(id=recipe.id, title=recipe.name))

    def remove_favorite(self, recipe_id: int) -> list[FavoriteEntry]:
        """Remove a favorite if present."""
        return self.favorites.remove(recipe_id)

    def list_favorites(self) -> list[FavoriteEntry]:
        """Return the current favorites."""
        return self.favorites.list_all()

    def plan_meal(self, recipe_id: int, date: str | None) -> list[MealPlanEntry]:
        """Plan a recipe for a date.

        Raises ValidationError when the date is missing. Unknown recipe ids are
        ignored. The same recipe may be planned more than once for a date.
        """
        if not date or not date.strip():
            raise ValidationError("date is required to plan a meal")
        recipe = self.store.get_by_id(recipe_id)
        if recipe is None:
            return self.meal_plan.list_all()
        return self.meal_plan.add(
            MealPlanEntry(id=recipe.id, title=recipe.name, date=date)
        )

    def remove_meal_plan_entry(
        self, recipe_id: int, date: str
    ) -> list[MealPlanEntry]:
        """Remove every planned meal matching the recipe and date."""
        return self.meal_plan.remove(recipe_id, date)

    def list_meal_plan(self) -> list[MealPlanEntry]:
        """Return the current meal plan."""
        return self.meal_plan.list_all()

    def add_shopping_items(
        self, recipe_id: int, explicit_items: list[str] | None = None
    ) -> list[str]:
        """Add items for a recipe, defaulting to its full ingredient list."""
        recipe = self.store.get_by_id(recipe_id)
        if recipe is None:
            return self.shopping_list.list_all()
        if explicit_items:
            items = list(explicit_items)
        else:
            items = split_ingredients(recipe.cleaned_ingredients)
        return self.shopping_list.add_items(items)

    def remove_shopping_item(self, index: int) -> list[str]:
        """Remove a shopping list item by position."""
        return self.shopping_list.remove_at(index)

    def list_shopping_list(self) -> list[str]:
        """Return the current shopping list."""
        return self.shopping_list.list_all()

    def add_search_history(self, name: str) -> list[str]:
        """Record a searched recipe name."""
        return self.search_history.add(name, self.history_limit)

    def list_search_history(self) -> list[str]:
        """Return recent searches, most recent first."""
        return self.search_history.list_all()

    def rate_recipe(self, recipe_id: int, score: int) -> float:
        """Record a rating and return the recipe's new average."""
        if self.store.get_by_id(recipe_id) is None:
            return self.get_average_rating(recipe_id)
        return _average(self.ratings.add(recipe_id, score))

    def get_average_rating(self, recipe_id: int) -> float:
        """Return the average rating rounded to one decimal, or 0 if unrated."""
        return _average(self.ratings.get(recipe_id))


def _average(scores: list[int]) -> float:
    if not scores:
        return 0.0
    return round(sum(scores) / len(scores), 1)
