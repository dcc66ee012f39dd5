"""Domain models for the recipe catalog."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Recipe:
    """Catalog recipe with a stable id assigned at load time."""

    id: int
    name: str
    image_url: str | None
    cuisine: str
    total_time_minutes: int
    calories_raw: str | int | float | None
    protein_raw: str | int | float | None
    cleaned_ingredients: str

    @property
    def ingredient_tokens(self) -> list[str]:
        """Lowercase, trimmed, non-empty ingredient tokens."""
        return [token.lower() for token in split_ingredients(self.cleaned_ingredients)]

    def to_record(self) -> dict[str, object]:
        """Render the recipe with the dataset's field names."""
        return {
            "id": self.id,
            "TranslatedRecipeName": self.name,
            "image-url": self.image_url,
            "Cuisine": self.cuisine,
            "TotalTimeInMins": self.total_time_minutes,
            "Calories": self.calories_raw,
            "Protein": self.protein_raw,
            "Cleaned-Ingredients": self.cleaned_ingredients,
        }


@dataclass(frozen=True)
class Substitution:
    """Suggested replacement for a missing ingredient."""

    original: str
    substitute: str


@dataclass
class RecipeSummary:
    """Display-ready projection of a recipe plus match metadata."""

    id: int
    title: str
    image: str | None
    prep_time: int | None
    calories: str | int | float | None = None
    protein: str | int | float | None = None
    missed_ingredient_count: int = 0
    missed_ingredients: list[str] = field(default_factory=list)
    match_count: int | None = None
    substitutions: list[Substitution] | None = None

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeSummary":
        """Build a summary carrying the recipe's source values."""
        return cls(
            id=recipe.id,
            title=recipe.name,
            image=recipe.image_url,
            prep_time=recipe.total_time_minutes,
            calories=recipe.calories_raw,
            protein=recipe.protein_raw,
        )


def split_ingredients(raw: str) -> list[str]:
    """Split comma-separated ingredient text, dropping empty tokens."""
    return [chunk.strip() for chunk in raw.split(",") if chunk.strip()]
