"""
Shared fixtures for the recipe catalog tests.

FakeRecordStore keeps rows in memory and mirrors the RecordStore interface,
so catalog and editor behaviour can be tested without a Supabase project.
"""

from typing import Dict, List, Optional

import pytest

from recipe_catalog.models import Ingredient, Recipe
from recipe_catalog.store import RecordStoreError

PUBLIC_URL_BASE = "https://store/"


class FakeRecordStore:
    """In-memory stand-in for RecordStore with per-operation failure toggles."""

    def __init__(self, recipes: Optional[List[Recipe]] = None):
        self.rows: Dict[str, dict] = {}
        for recipe in recipes or []:
            self.rows[recipe.id] = recipe.to_record()

        self.image_prefix = "recipes"
        self.uploads: Dict[str, bytes] = {}

        self.fail_list = False
        self.fail_upsert = False
        self.fail_delete = False
        self.fail_upload = False
        self.fail_public_url = False

        self.list_calls = 0
        self.upsert_calls = 0
        self.delete_calls = 0

    def list_recipes(self) -> List[Recipe]:
        self.list_calls += 1
        if self.fail_list:
            raise RecordStoreError("list_recipes", "connection refused")
        rows = sorted(self.rows.values(), key=lambda row: row.get("name", ""))
        return [Recipe.model_validate(row) for row in rows]

    def upsert_recipe(self, recipe: Recipe) -> List[Recipe]:
        self.upsert_calls += 1
        if self.fail_upsert:
            raise RecordStoreError("upsert_recipe", "permission denied")
        record = recipe.to_record()
        self.rows[recipe.id] = record
        return [Recipe.model_validate(record)]

    def delete_recipe(self, recipe_id: str) -> None:
        self.delete_calls += 1
        if self.fail_delete:
            raise RecordStoreError("delete_recipe", "permission denied")
        self.rows.pop(recipe_id, None)

    def ping(self) -> bool:
        return not self.fail_list

    def upload_image(self, object_name: str, data: bytes, content_type: Optional[str] = None) -> str:
        if self.fail_upload:
            raise RecordStoreError("upload_image", "bucket not found")
        path = f"{self.image_prefix}/{object_name}"
        self.uploads[path] = data
        return path

    def get_public_url(self, path: str) -> str:
        if self.fail_public_url:
            raise RecordStoreError("get_public_url", "no public URL")
        return PUBLIC_URL_BASE + path


@pytest.fixture
def atassi():
    """A southern dish with ingredients and steps."""
    return Recipe(
        id="a",
        name="Atassi",
        region="Sud",
        category="Pâtes et Céréales (Wɔ̌)",
        difficulty="Facile",
        prep_time="15 min",
        cook_time="40 min",
        image="https://store/recipes/atassi.jpg",
        ingredients=[
            Ingredient(item="Riz", amount="500 g"),
            Ingredient(item="Haricots", amount="250 g"),
        ],
        steps=["Tremper les haricots", "Cuire avec le riz"],
    )


@pytest.fixture
def kom():
    """A northern dish without optional fields."""
    return Recipe(
        id="b",
        name="Kom",
        region="Nord",
        category="Plats de Résistance & Ragoûts",
        difficulty="Moyen",
        prep_time="20 min",
        cook_time="30 min",
        image="",
    )


@pytest.fixture
def sample_recipes(atassi, kom):
    return [atassi, kom]


@pytest.fixture
def fake_store(sample_recipes):
    """Fake store seeded with the two sample recipes."""
    return FakeRecordStore(sample_recipes)


@pytest.fixture
def empty_store():
    return FakeRecordStore()
