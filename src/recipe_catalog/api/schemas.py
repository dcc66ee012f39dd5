"""Pydantic models for HTTP request and response payloads."""

from pydantic import BaseModel, ConfigDict, Field

from recipe_catalog.domain.recipes import RecipeSummary, Substitution


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SubstitutionPayload(_Payload):
    """Ingredient substitution payload."""

    original: str
    substitute: str


class RecipeSummaryPayload(_Payload):
    """Recipe summary payload with camelCase keys."""

    id: int
    title: str
    image: str | None = None
    prep_time: int | None = Field(default=None, alias="prepTime")
    calories: str | int | float | None = None
    protein: str | int | float | None = None
    missed_ingredient_count: int = Field(default=0, alias="missedIngredientCount")
    missed_ingredients: list[str] = Field(
        default_factory=list, alias="missedIngredients"
    )
    match_count: int | None = Field(default=None, alias="matchCount")
    substitutions: list[SubstitutionPayload] | None = None

    @classmethod
    def from_summary(cls, summary: RecipeSummary) -> "RecipeSummaryPayload":
        """Build a payload from a domain summary."""
        substitutions = None
        if summary.substitutions is not None:
            substitutions = [
                SubstitutionPayload(original=item.original, substitute=item.substitute)
                for item in summary.substitutions
            ]
        return cls(
            id=summary.id,
            title=summary.title,
            image=summary.image,
            prep_time=summary.prep_time,
            calories=summary.calories,
            protein=summary.protein,
            missed_ingredient_count=summary.missed_ingredient_count,
            missed_ingredients=list(summary.missed_ingredients),
            match_count=summary.match_count,
            substitutions=substitutions,
        )

    def to_summary(self) -> RecipeSummary:
        """Convert to a domain summary."""
        substitutions = None
        if self.substitutions is not None:
            substitutions = [
                Substitution(original=item.original, substitute=item.substitute)
                for item in self.substitutions
            ]
        return RecipeSummary(
            id=self.id,
            title=self.title,
            image=self.image,
            prep_time=self.prep_time,
            calories=self.calories,
            protein=self.protein,
            missed_ingredient_count=self.missed_ingredient_count,
            missed_ingredients=list(self.missed_ingredients),
            match_count=self.match_count,
            substitutions=substitutions,
        )


class IngredientsRequest(_Payload):
    """Ingredient match request."""

    ingredients: list[str] = Field(default_factory=list)


class EnrichRequest(_Payload):
    """Enrichment request; every recipe needs at least an id and a title."""

    recipes: list[RecipeSummaryPayload]
    include_substitutions: bool = Field(default=False, alias="includeSubstitutions")


class SearchHistoryRequest(_Payload):
    """Search history entry."""

    recipe_name: str = Field(alias="recipeName")


class FavoriteRequest(_Payload):
    """Favorite request."""

    recipe_id: int = Field(alias="recipeId")


class MealPlanRequest(_Payload):
    """Meal plan request; the date is checked by the service."""

    recipe_id: int = Field(alias="recipeId")
    date: str | None = None


class ShoppingListRequest(_Payload):
    """Shopping list request."""

    recipe_id: int = Field(alias="recipeId")
    missed_ingredients: list[str] = Field(
        default_factory=list, alias="missedIngredients"
    )


class RatingRequest(_Payload):
    """Rating request."""

    recipe_id: int = Field(alias="recipeId")
    rating: int
