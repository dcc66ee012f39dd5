"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recipe_catalog.api.schemas import (
    EnrichRequest,
    FavoriteRequest,
    IngredientsRequest,
    MealPlanRequest,
    RatingRequest,
    RecipeSummaryPayload,
    SearchHistoryRequest,
    ShoppingListRequest,
)
from recipe_catalog.app_logging import configure_logging
from recipe_catalog.config import parse_allowed_origins
from recipe_catalog.containers import AppContainer
from recipe_catalog.domain.errors import ValidationError
from recipe_catalog.domain.recipes import RecipeSummary


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Serving recipe catalog: recipes=%s", len(app.state.container.recipe_store)
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/recipes")
    async def list_recipes(request: Request) -> list[dict[str, object]]:
        """Return every recipe in the catalog."""
        state_container: AppContainer = request.app.state.container
        recipes = state_container.catalog_service.list_recipes()
        return [recipe.to_record() for recipe in recipes]

    @app.get("/recipe/{recipe_id}")
    async def recipe_detail(recipe_id: int, request: Request) -> dict[str, object]:
        """Return a single recipe."""
        state_container: AppContainer = request.app.state.container
        recipe = state_container.catalog_service.get_recipe(recipe_id)
        if recipe is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found"
            )
        return recipe.to_record()

    @app.get("/youtube-search")
    async def youtube_search(title: str, request: Request) -> dict[str, str | None]:
        """Find a cooking video for a recipe title."""
        state_container: AppContainer = request.app.state.container
        video_id = await state_container.video_service.lookup_video_id(title)
        return {"videoId": video_id}

    @app.get("/filter-recipes-by-name")
    async def filter_recipes_by_name(
        request: Request,
        recipe_name: str = Query(alias="recipeName"),
        cuisine_filter: str | None = Query(default=None, alias="cuisineFilter"),
        max_time_filter: str | None = Query(default=None, alias="maxTimeFilter"),
        exclude_ingredient: str | None = Query(
            default=None, alias="excludeIngredient"
        ),
    ) -> list[dict[str, object]]:
        """Filter recipes by name, cuisine, time and excluded ingredient."""
        state_container: AppContainer = request.app.state.container
        summaries = state_container.catalog_service.search_by_name(
            recipe_name,
            cuisine=cuisine_filter,
            max_time=_parse_max_time(max_time_filter),
            exclude_ingredient=exclude_ingredient,
        )
        return _summaries_payload(summaries)

    @app.post("/filter-recipes-by-ingredients")
    async def filter_recipes_by_ingredients(
        body: IngredientsRequest, request: Request
    ) -> list[dict[str, object]]:
        """Recommend recipes for the ingredients on hand."""
        state_container: AppContainer = request.app.state.container
        summaries = state_container.catalog_service.search_by_ingredients(
            body.ingredients
        )
        return _summaries_payload(summaries)

    @app.post("/enrich-recipes")
    async def enrich_recipes(
        body: EnrichRequest, request: Request
    ) -> list[dict[str, object]]:
        """Fill display fields and optional substitutions."""
        state_container: AppContainer = request.app.state.container
        summaries = state_container.catalog_service.enrich(
            [item.to_summary() for item in body.recipes],
            include_substitutions=body.include_substitutions,
        )
        return _summaries_payload(summaries)

    @app.get("/random-recipe")
    async def random_recipe(request: Request) -> list[dict[str, object]]:
        """Return one random recipe summary."""
        state_container: AppContainer = request.app.state.container
        return _summaries_payload(state_container.catalog_service.random_recipe())

    @app.get("/search-history")
    async def get_search_history(request: Request) -> list[str]:
        """Return recent searches."""
        state_container: AppContainer = request.app.state.container
        return state_container.user_state_service.list_search_history()

    @app.post("/search-history")
    async def add_search_history(
        body: SearchHistoryRequest, request: Request
    ) -> list[str]:
        """Record a recipe search."""
        state_container: AppContainer = request.app.state.container
        return state_container.user_state_service.add_search_history(body.recipe_name)

    @app.get("/favorites")
    async def get_favorites(request: Request) -> list[dict[str, object]]:
        """Return favorite recipes."""
        state_container: AppContainer = request.app.state.container
        favorites = state_container.user_state_service.list_favorites()
        return [asdict(entry) for entry in favorites]

    @app.post("/favorites")
    async def add_favorite(
        body: FavoriteRequest, request: Request
    ) -> list[dict[str, object]]:
        """Favorite a recipe."""
        state_container: AppContainer = request.app.state.container
        favorites = state_container.user_state_service.add_favorite(body.recipe_id)
        return [asdict(entry) for entry in favorites]

    @app.delete("/favorites/{recipe_id}")
    async def remove_favorite(
        recipe_id: int, request: Request
    ) -> list[dict[str, object]]:
        """Remove a favorite."""
        state_container: AppContainer = request.app.state.container
        favorites = state_container.user_state_service.remove_favorite(recipe_id)
        return [asdict(entry) for entry in favorites]

    @app.get("/meal-plan")
    async def get_meal_plan(request: Request) -> list[dict[str, object]]:
        """Return planned meals."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.user_state_service.list_meal_plan()
        return [asdict(entry) for entry in entries]

    @app.post("/meal-plan")
    async def plan_meal(
        body: MealPlanRequest, request: Request
    ) -> list[dict[str, object]]:
        """Plan a recipe for a date."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.user_state_service.plan_meal(
            body.recipe_id, body.date
        )
        return [asdict(entry) for entry in entries]

    @app.delete("/meal-plan/{recipe_id}/{date}")
    async def remove_meal_plan_entry(
        recipe_id: int, date: str, request: Request
    ) -> list[dict[str, object]]:
        """Remove planned meals for a recipe and date."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.user_state_service.remove_meal_plan_entry(
            recipe_id, date
        )
        return [asdict(entry) for entry in entries]

    @app.get("/shopping-list")
    async def get_shopping_list(request: Request) -> list[str]:
        """Return the shopping list."""
        state_container: AppContainer = request.app.state.container
        return state_container.user_state_service.list_shopping_list()

    @app.post("/shopping-list")
    async def add_shopping_items(
        body: ShoppingListRequest, request: Request
    ) -> list[str]:
        """Add a recipe's missing ingredients to the shopping list."""
        state_container: AppContainer = request.app.state.container
        return state_container.user_state_service.add_shopping_items(
            body.recipe_id, body.missed_ingredients
        )

    @app.delete("/shopping-list/{index}")
    async def remove_shopping_item(index: int, request: Request) -> list[str]:
        """Remove a shopping list item by position."""
        state_container: AppContainer = request.app.state.container
        return state_container.user_state_service.remove_shopping_item(index)

    @app.post("/rate-recipe")
    async def rate_recipe(body: RatingRequest, request: Request) -> dict[str, float]:
        """Rate a recipe and return its average."""
        state_container: AppContainer = request.app.state.container
        average = state_container.user_state_service.rate_recipe(
            body.recipe_id, body.rating
        )
        return {"averageRating": average}

    @app.get("/rating/{recipe_id}")
    async def get_rating(recipe_id: int, request: Request) -> dict[str, float]:
        """Return a recipe's average rating."""
        state_container: AppContainer = request.app.state.container
        average = state_container.user_state_service.get_average_rating(recipe_id)
        return {"averageRating": average}

    return app


def _summaries_payload(summaries: list[RecipeSummary]) -> list[dict[str, object]]:
    """Render summaries with camelCase keys, omitting unset match fields."""
    return [
        RecipeSummaryPayload.from_summary(summary).model_dump(
            by_alias=True, exclude_none=True
        )
        for summary in summaries
    ]


def _parse_max_time(raw: str | None) -> int | None:
    """Parse the max time filter, ignoring blank or non-numeric values."""
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    if value < 0:
        return None
    return value
