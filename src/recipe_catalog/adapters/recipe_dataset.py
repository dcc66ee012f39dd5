"""JSON recipe dataset reader."""

import logging
from pathlib import Path

import pydantic
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from recipe_catalog.domain.errors import DatasetLoadError
from recipe_catalog.domain.recipes import Recipe

_logger = logging.getLogger(__name__)


class RecipeRecord(BaseModel):
    """Single recipe record as stored in the dataset file."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(alias="TranslatedRecipeName")
    image_url: str | None = Field(default=None, alias="image-url")
    cuisine: str = Field(default="", alias="Cuisine")
    total_time_minutes: int = Field(default=0, ge=0, alias="TotalTimeInMins")
    calories: str | int | float | None = Field(default=None, alias="Calories")
    protein: str | int | float | None = Field(default=None, alias="Protein")
    cleaned_ingredients: str = Field(alias="Cleaned-Ingredients")


_RECORDS = TypeAdapter(list[RecipeRecord])


def read_dataset(path: str | Path) -> list[Recipe]:
    """Read the dataset file and return recipes with ids 1..N."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        _logger.error("Failed to read recipe dataset: path=%s", path)
        raise DatasetLoadError(f"Cannot read recipe dataset at {path}") from exc
    try:
        records = _RECORDS.validate_json(raw)
    except pydantic.ValidationError as exc:
        _logger.error("Malformed recipe dataset: path=%s", path)
        raise DatasetLoadError(f"Malformed recipe dataset at {path}") from exc
    recipes = _assign_ids(records)
    _logger.info("Loaded recipe dataset: path=%s recipes=%s", path, len(recipes))
    return recipes


def parse_records(data: object) -> list[Recipe]:
    """Validate already-decoded dataset records and assign ids."""
    try:
        records = _RECORDS.validate_python(data)
    except pydantic.ValidationError as exc:
        raise DatasetLoadError("Malformed recipe records") from exc
    return _assign_ids(records)


def _assign_ids(records: list[RecipeRecord]) -> list[Recipe]:
    return [
        Recipe(
            id=index,
            name=record.name,
            image_url=record.image_url,
            cuisine=record.cuisine,
            total_time_minutes=record.total_time_minutes,
            calories_raw=record.calories,
            protein_raw=record.protein,
            cleaned_ingredients=record.cleaned_ingredients,
        )
        for index, record in enumerate(records, start=1)
    ]
