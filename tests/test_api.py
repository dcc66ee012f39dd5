"""Tests for HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from recipe_catalog.api.app import create_app
from recipe_catalog.services.videos import VideoService
from tests.conftest import FailingVideoClient


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_and_detail_recipes(container) -> None:
    client = TestClient(create_app(container))

    listing = client.get("/recipes").json()
    detail = client.get("/recipe/2")
    missing = client.get("/recipe/99")

    assert [item["id"] for item in listing] == [1, 2, 3, 4]
    assert detail.status_code == 200
    assert detail.json()["TranslatedRecipeName"] == "Egg Fried Rice"
    assert missing.status_code == 404
    assert missing.json() == {"detail": "Recipe not found"}


def test_filter_by_name_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.get(
        "/filter-recipes-by-name",
        params={"recipeName": "CHICKEN", "maxTimeFilter": "50"},
    )

    assert response.status_code == 200
    [curry] = response.json()
    assert curry["id"] == 1
    assert curry["title"] == "Chicken Curry"
    assert curry["prepTime"] == 45
    assert curry["missedIngredientCount"] == 0
    assert curry["missedIngredients"] == []
    assert "matchCount" not in curry


def test_filter_by_name_ignores_blank_max_time(container) -> None:
    client = TestClient(create_app(container))

    response = client.get(
        "/filter-recipes-by-name", params={"recipeName": "", "maxTimeFilter": ""}
    )

    assert len(response.json()) == 4


@pytest.mark.parametrize("max_time", ["abc", "\u00b2", "-3", "4.5"])
def test_filter_by_name_ignores_invalid_max_time(container, max_time: str) -> None:
    client = TestClient(create_app(container), raise_server_exceptions=False)

    response = client.get(
        "/filter-recipes-by-name",
        params={"recipeName": "", "maxTimeFilter": max_time},
    )

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [1, 2, 3, 4]


def test_filter_by_ingredients_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/filter-recipes-by-ingredients", json={"ingredients": ["egg"]}
    )

    assert response.status_code == 200
    data = response.json()
    assert [item["id"] for item in data] == [2, 3]
    assert data[0]["matchCount"] == 1
    assert data[0]["missedIngredients"] == ["rice", "soy sauce", "spring onion"]
    assert data[0]["calories"] == "Approx. 300"


def test_enrich_recipes_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/enrich-recipes",
        json={
            "recipes": [
                {
                    "id": 3,
                    "title": "Masala Omelette",
                    "image": None,
                    "prepTime": 10,
                    "missedIngredientCount": 2,
                    "missedIngredients": ["egg", "green chilli"],
                }
            ],
            "includeSubstitutions": True,
        },
    )

    assert response.status_code == 200
    [summary] = response.json()
    assert summary["image"] == "https://via.placeholder.com/150"
    assert summary["protein"] == "Approx. 12g"
    assert summary["substitutions"] == [
        {"original": "egg", "substitute": "flaxseed"},
        {"original": "green chilli", "substitute": "No substitute available"},
    ]


def test_random_recipe_endpoint(container) -> None:
    client = TestClient(create_app(container))

    data = client.get("/random-recipe").json()

    assert len(data) == 1
    assert data[0]["id"] in {1, 2, 3, 4}


def test_youtube_search_endpoint(container, video_client) -> None:
    client = TestClient(create_app(container))

    response = client.get("/youtube-search", params={"title": "Dosa"})

    assert response.json() == {"videoId": "abc123"}
    assert video_client.queries == ["Dosa recipe in English"]


def test_youtube_search_failure_degrades(container) -> None:
    container.video_service = VideoService(client=FailingVideoClient())
    client = TestClient(create_app(container))

    response = client.get("/youtube-search", params={"title": "Dosa"})

    assert response.status_code == 200
    assert response.json() == {"videoId": None}


def test_favorites_flow(container) -> None:
    client = TestClient(create_app(container))

    client.post("/favorites", json={"recipeId": 1})
    added = client.post("/favorites", json={"recipeId": 1}).json()
    removed = client.delete("/favorites/1").json()

    assert added == [{"id": 1, "title": "Chicken Curry"}]
    assert removed == []
    assert client.get("/favorites").json() == []


def test_meal_plan_flow(container) -> None:
    client = TestClient(create_app(container))

    client.post("/meal-plan", json={"recipeId": 2, "date": "2024-05-01"})
    plan = client.get("/meal-plan").json()
    removed = client.delete("/meal-plan/2/2024-05-01").json()

    assert plan == [{"id": 2, "title": "Egg Fried Rice", "date": "2024-05-01"}]
    assert removed == []


def test_meal_plan_requires_date(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/meal-plan", json={"recipeId": 2})

    assert response.status_code == 422
    assert "date" in response.json()["detail"]


def test_shopping_list_flow(container) -> None:
    client = TestClient(create_app(container))

    added = client.post(
        "/shopping-list", json={"recipeId": 3, "missedIngredients": []}
    ).json()
    unchanged = client.delete("/shopping-list/10").json()
    removed = client.delete("/shopping-list/0").json()

    assert added == ["egg", "onion", "green chilli", "salt"]
    assert unchanged == added
    assert removed == ["onion", "green chilli", "salt"]
    assert client.get("/shopping-list").json() == removed


def test_search_history_flow(container) -> None:
    client = TestClient(create_app(container))

    client.post("/search-history", json={"recipeName": "curry"})
    history = client.post("/search-history", json={"recipeName": "dosa"}).json()

    assert history == ["dosa", "curry"]
    assert client.get("/search-history").json() == ["dosa", "curry"]


def test_rating_flow(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/rating/1").json() == {"averageRating": 0}
    client.post("/rate-recipe", json={"recipeId": 1, "rating": 4})
    response = client.post("/rate-recipe", json={"recipeId": 1, "rating": 5})

    assert response.json() == {"averageRating": 4.5}
    assert client.get("/rating/1").json() == {"averageRating": 4.5}


def test_enrich_recipes_requires_id_and_title(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/enrich-recipes", json={"recipes": [{"image": None, "prepTime": 10}]}
    )

    assert response.status_code == 422
