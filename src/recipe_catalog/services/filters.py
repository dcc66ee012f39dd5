"""Recipe filtering and ingredient-match ranking."""

from collections.abc import Iterable

from recipe_catalog.domain.recipes import Recipe, RecipeSummary

DEFAULT_MATCH_LIMIT = 5


def filter_by_name(
    recipes: Iterable[Recipe],
    query: str,
    cuisine: str | None = None,
    max_time: int | None = None,
    exclude_ingredient: str | None = None,
) -> list[RecipeSummary]:
    """Filter recipes by name and optional attributes, preserving store order."""
    query_lower = query.lower()
    cuisine_lower = cuisine.lower() if cuisine else None
    exclude_lower = exclude_ingredient.lower() if exclude_ingredient else None
    results = []
    for recipe in recipes:
        if query_lower not in recipe.name.lower():
            continue
        if cuisine_lower and recipe.cuisine.lower() != cuisine_lower:
            continue
        if max_time is not None and recipe.total_time_minutes > max_time:
            continue
        if exclude_lower and exclude_lower in recipe.cleaned_ingredients.lower():
            continue
        results.append(RecipeSummary.from_recipe(recipe))
    return results


def match_by_ingredients(
    recipes: Iterable[Recipe],
    user_ingredients: Iterable[str],
    limit: int = DEFAULT_MATCH_LIMIT,
) -> list[RecipeSummary]:
    """Rank recipes by how many of their ingredients the user already has.

    A recipe token is matched when it contains any user term as a substring.
    Recipes without a match are dropped; the rest are ordered by match count
    (descending) and then by missed ingredient count (ascending).
    """
    terms = normalize_terms(user_ingredients)
    if not terms:
        return []
    summaries = []
    for recipe in recipes:
        matched: list[str] = []
        missed: list[str] = []
        for token in recipe.ingredient_tokens:
            if any(term in token for term in terms):
                matched.append(token)
            else:
                missed.append(token)
        if not matched:
            continue
        summary = RecipeSummary.from_recipe(recipe)
        summary.match_count = len(matched)
        summary.missed_ingredients = missed
        summary.missed_ingredient_count = len(missed)
        summaries.append(summary)
    ranked = sorted(
        summaries,
        key=lambda item: (-(item.match_count or 0), item.missed_ingredient_count),
    )
    return ranked[:limit]


def normalize_terms(values: Iterable[str]) -> list[str]:
    """Lowercase and trim user terms, dropping empty ones."""
    terms = []
    for value in values:
        cleaned = value.strip().lower()
        if cleaned:
            terms.append(cleaned)
    return terms
