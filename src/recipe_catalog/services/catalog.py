"""Read-side catalog operations."""

import random
from dataclasses import dataclass, field

from recipe_catalog.domain.recipes import Recipe, RecipeSummary
from recipe_catalog.services.enrichment import EnrichmentService
from recipe_catalog.services.filters import (
    DEFAULT_MATCH_LIMIT,
    filter_by_name,
    match_by_ingredients,
)
from recipe_catalog.services.recipe_store import RecipeStore


@dataclass
class CatalogService:
    """Application service for browsing and searching recipes."""

    store: RecipeStore
    enrichment: EnrichmentService
    match_limit: int = DEFAULT_MATCH_LIMIT
    rng: random.Random = field(default_factory=random.Random)

    def list_recipes(self) -> list[Recipe]:
        """Return every recipe in the catalog."""
        return list(self.store.all())

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        """Return a recipe by id, if present."""
        return self.store.get_by_id(recipe_id)

    def search_by_name(
        self,
        query: str,
        cuisine: str | None = None,
        max_time: int | None = None,
        exclude_ingredient: str | None = None,
    ) -> list[RecipeSummary]:
        """Filter by name and attributes, filling missing nutrition values."""
        summaries = filter_by_name(
            self.store.all(),
            query,
            cuisine=cuisine,
            max_time=max_time,
            exclude_ingredient=exclude_ingredient,
        )
        return self.enrichment.enrich(summaries)

    def search_by_ingredients(self, ingredients: list[str]) -> list[RecipeSummary]:
        """Recommend recipes that best use the given ingredients."""
        summaries = match_by_ingredients(
            self.store.all(), ingredients, limit=self.match_limit
        )
        return self.enrichment.enrich(summaries)

    def enrich(
        self, summaries: list[RecipeSummary], include_substitutions: bool = False
    ) -> list[RecipeSummary]:
        """Enrich caller-supplied summaries."""
        return self.enrichment.enrich(summaries, include_substitutions)

    def random_recipe(self) -> list[RecipeSummary]:
        """Return a single random recipe as an enriched summary list."""
        if not len(self.store):
            return []
        recipe = self.rng.choice(self.store.recipes)
        return self.enrichment.enrich([RecipeSummary.from_recipe(recipe)])
