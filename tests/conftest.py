"""Shared test fixtures."""

import random
from dataclasses import dataclass, field

import pytest

from recipe_catalog.adapters.memory_state import (
    InMemoryFavoritesRepository,
    InMemoryMealPlanRepository,
    InMemoryRatingRepository,
    InMemorySearchHistoryRepository,
    InMemoryShoppingListRepository,
)
from recipe_catalog.adapters.youtube_client import VideoClient
from recipe_catalog.config import Settings
from recipe_catalog.containers import AppContainer
from recipe_catalog.services.catalog import CatalogService
from recipe_catalog.services.enrichment import EnrichmentService, PlaceholderGenerator
from recipe_catalog.services.recipe_store import RecipeStore
from recipe_catalog.services.user_state import UserStateService
from recipe_catalog.services.videos import VideoService

SAMPLE_RECORDS = [
    {
        "TranslatedRecipeName": "Chicken Curry",
        "image-url": "https://images.test/chicken-curry.jpg",
        "Cuisine": "Indian",
        "TotalTimeInMins": 45,
        "Calories": 420,
        "Protein": "30g",
        "Cleaned-Ingredients": "chicken, onion, tomato, garam masala, salt",
    },
    {
        "TranslatedRecipeName": "Egg Fried Rice",
        "image-url": "",
        "Cuisine": "Chinese",
        "TotalTimeInMins": 20,
        "Cleaned-Ingredients": "egg, rice, soy sauce, spring onion",
    },
    {
        "TranslatedRecipeName": "Masala Omelette",
        "image-url": "https://images.test/omelette.jpg",
        "Cuisine": "Indian",
        "TotalTimeInMins": 10,
        "Cleaned-Ingredients": "egg, onion, green chilli, salt",
    },
    {
        "TranslatedRecipeName": "Chicken Soup",
        "Cuisine": "Continental",
        "TotalTimeInMins": 60,
        "Cleaned-Ingredients": "chicken, carrot, celery, onion, salt, pepper",
    },
]


@dataclass
class FixedPlaceholderGenerator(PlaceholderGenerator):
    """Placeholder generator returning constant labels."""

    calls: int = 0

    def calories(self) -> str:
        self.calls += 1
        return "Approx. 300"

    def protein(self) -> str:
        self.calls += 1
        return "Approx. 12g"


@dataclass
class FakeVideoClient(VideoClient):
    """Fake video client that records queries."""

    video_id: str | None = "abc123"
    queries: list[str] = field(default_factory=list)

    async def search_video_id(self, query: str) -> str | None:
        self.queries.append(query)
        return self.video_id


@dataclass
class FailingVideoClient(VideoClient):
    """Video client that always fails."""

    async def search_video_id(self, query: str) -> str | None:
        raise RuntimeError("quota exceeded")


def build_user_state_service(store: RecipeStore) -> UserStateService:
    return UserStateService(
        store=store,
        favorites=InMemoryFavoritesRepository(),
        meal_plan=InMemoryMealPlanRepository(),
        shopping_list=InMemoryShoppingListRepository(),
        search_history=InMemorySearchHistoryRepository(),
        ratings=InMemoryRatingRepository(),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(recipes_path="recipes.json", youtube_api_key=None)


@pytest.fixture
def recipe_store() -> RecipeStore:
    return RecipeStore.from_records(SAMPLE_RECORDS)


@pytest.fixture
def placeholders() -> FixedPlaceholderGenerator:
    return FixedPlaceholderGenerator()


@pytest.fixture
def enrichment(placeholders: FixedPlaceholderGenerator) -> EnrichmentService:
    return EnrichmentService(placeholders=placeholders)


@pytest.fixture
def catalog_service(
    recipe_store: RecipeStore, enrichment: EnrichmentService
) -> CatalogService:
    return CatalogService(
        store=recipe_store, enrichment=enrichment, rng=random.Random(7)
    )


@pytest.fixture
def user_state_service(recipe_store: RecipeStore) -> UserStateService:
    return build_user_state_service(recipe_store)


@pytest.fixture
def video_client() -> FakeVideoClient:
    return FakeVideoClient()


@pytest.fixture
def container(
    settings: Settings,
    recipe_store: RecipeStore,
    catalog_service: CatalogService,
    user_state_service: UserStateService,
    video_client: FakeVideoClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        recipe_store=recipe_store,
        catalog_service=catalog_service,
        user_state_service=user_state_service,
        video_service=VideoService(client=video_client),
        close_resources=close_resources,
    )
