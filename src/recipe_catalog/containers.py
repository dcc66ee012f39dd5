"""Dependency container wiring for the application."""

import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from recipe_catalog.adapters.memory_state import (
    InMemoryFavoritesRepository,
    InMemoryMealPlanRepository,
    InMemoryRatingRepository,
    InMemorySearchHistoryRepository,
    InMemoryShoppingListRepository,
)
from recipe_catalog.adapters.youtube_client import HttpxYouTubeClient
from recipe_catalog.config import Settings
from recipe_catalog.services.catalog import CatalogService
from recipe_catalog.services.enrichment import (
    EnrichmentService,
    RandomPlaceholderGenerator,
)
from recipe_catalog.services.recipe_store import RecipeStore
from recipe_catalog.services.user_state import UserStateService
from recipe_catalog.services.videos import VideoService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    recipe_store: RecipeStore
    catalog_service: CatalogService
    user_state_service: UserStateService
    video_service: VideoService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, recipe_store: RecipeStore | None = None
) -> AppContainer:
    """Create the default dependency container.

    Loads the recipe dataset unless a store is given; a missing or malformed
    dataset raises DatasetLoadError.
    """
    resolved_settings = settings or Settings()
    store = recipe_store or RecipeStore.load(resolved_settings.recipes_path)
    enrichment = EnrichmentService(
        placeholders=RandomPlaceholderGenerator(resolved_settings.placeholder_seed),
        placeholder_image_url=resolved_settings.placeholder_image_url,
    )
    catalog_service = CatalogService(
        store=store,
        enrichment=enrichment,
        match_limit=resolved_settings.match_result_limit,
        rng=random.Random(resolved_settings.placeholder_seed),
    )
    user_state_service = UserStateService(
        store=store,
        favorites=InMemoryFavoritesRepository(),
        meal_plan=InMemoryMealPlanRepository(),
        shopping_list=InMemoryShoppingListRepository(),
        search_history=InMemorySearchHistoryRepository(),
        ratings=InMemoryRatingRepository(),
        history_limit=resolved_settings.search_history_limit,
    )
    youtube_client = None
    if resolved_settings.youtube_api_key:
        youtube_client = HttpxYouTubeClient.create(
            api_key=resolved_settings.youtube_api_key,
            base_url=resolved_settings.youtube_search_url,
        )
    video_service = VideoService(client=youtube_client)

    async def close_resources() -> None:
        if youtube_client is not None:
            await youtube_client.close()

    return AppContainer(
        settings=resolved_settings,
        recipe_store=store,
        catalog_service=catalog_service,
        user_state_service=user_state_service,
        video_service=video_service,
        close_resources=close_resources,
    )
