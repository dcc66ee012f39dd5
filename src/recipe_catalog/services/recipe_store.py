"""Read-only recipe store."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from recipe_catalog.adapters.recipe_dataset import parse_records, read_dataset
from recipe_catalog.domain.recipes import Recipe


@dataclass
class RecipeStore:
    """Immutable-after-load collection of recipes keyed by id."""

    recipes: tuple[Recipe, ...]
    _by_id: dict[int, Recipe] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_id = {recipe.id: recipe for recipe in self.recipes}

    @classmethod
    def load(cls, source: str | Path) -> "RecipeStore":
        """Load recipes from a dataset file, raising DatasetLoadError on failure."""
        return cls(tuple(read_dataset(source)))

    @classmethod
    def from_records(cls, records: object) -> "RecipeStore":
        """Build a store from decoded dataset records."""
        return cls(tuple(parse_records(records)))

    def get_by_id(self, recipe_id: int) -> Recipe | None:
        """Return the recipe for an id, if present."""
        return self._by_id.get(recipe_id)

    def all(self) -> Iterator[Recipe]:
        """Iterate over every recipe in id order."""
        return iter(self.recipes)

    def __len__(self) -> int:
        return len(self.recipes)
