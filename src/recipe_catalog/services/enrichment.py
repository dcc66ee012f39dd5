"""Display enrichment for recipe summaries."""

import random
from dataclasses import dataclass, field
from typing import Protocol

from recipe_catalog.domain.recipes import RecipeSummary, Substitution

DEFAULT_PLACEHOLDER_IMAGE = "https://via.placeholder.com/150"
NO_SUBSTITUTE = "No substitute available"

SUBSTITUTIONS = {
    "chicken": "tofu",
    "beef": "mushroom",
    "fish": "tempeh",
    "egg": "flaxseed",
    "milk": "almond milk",
}


class PlaceholderGenerator(Protocol):
    """Source of stand-in nutrition values."""

    def calories(self) -> str:
        """Return an approximate calorie label."""

    def protein(self) -> str:
        """Return an approximate protein label."""


@dataclass
class RandomPlaceholderGenerator(PlaceholderGenerator):
    """Seedable random placeholder values."""

    seed: int | None = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def calories(self) -> str:
        """Return "Approx. N" with N in [200, 500)."""
        return f"Approx. {self._rng.randrange(200, 500)}"

    def protein(self) -> str:
        """Return "Approx. Ng" with N in [5, 25)."""
        return f"Approx. {self._rng.randrange(5, 25)}g"


@dataclass
class EnrichmentService:
    """Fills missing display fields and suggests substitutions."""

    placeholders: PlaceholderGenerator
    placeholder_image_url: str = DEFAULT_PLACEHOLDER_IMAGE

    def enrich(
        self, summaries: list[RecipeSummary], include_substitutions: bool = False
    ) -> list[RecipeSummary]:
        """Enrich summaries in place and return them.

        Values already present are never overwritten, so enriching twice has the
        same effect as enriching once.
        """
        for summary in summaries:
            if not summary.calories:
                summary.calories = self.placeholders.calories()
            if not summary.protein:
                summary.protein = self.placeholders.protein()
            if not summary.image:
                summary.image = self.placeholder_image_url
            if include_substitutions and summary.missed_ingredients:
                summary.substitutions = suggest_substitutions(
                    summary.missed_ingredients
                )
        return summaries


def suggest_substitutions(ingredients: list[str]) -> list[Substitution]:
    """Map each ingredient to its substitute, or the no-substitute marker."""
    return [
        Substitution(
            original=ingredient,
            substitute=SUBSTITUTIONS.get(ingredient.strip().lower(), NO_SUBSTITUTE),
        )
        for ingredient in ingredients
    ]
