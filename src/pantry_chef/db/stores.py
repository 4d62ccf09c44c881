"""
Pantry Chef - Row stores.

CRUD over the two user-owned tables. Every query is filtered by user_id
in addition to row-level security, and lists are newest first.
"""

import logging

from pantry_chef.db.adapter import RowStoreClient
from pantry_chef.models import PantryItem, Recipe, SavedRecipe

logger = logging.getLogger(__name__)

PANTRY_TABLE = "pantry_items"
SAVED_RECIPES_TABLE = "saved_recipes"


class RowNotFound(LookupError):
    """No row with that id belongs to the current user."""


def _clean_quantity(quantity: str | None) -> str | None:
    if quantity is None:
        return None
    return quantity.strip() or None


class PantryStore:
    """Pantry items for one user."""

    def __init__(self, client: RowStoreClient, user_id: str):
        self.client = client
        self.user_id = user_id

    def list_all(self) -> list[PantryItem]:
        response = (
            self.client.table(PANTRY_TABLE)
            .select("*")
            .eq("user_id", self.user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [PantryItem.model_validate(row) for row in response.data]

    def add(self, name: str, quantity: str | None = None) -> PantryItem:
        """Insert an item. Name and quantity are trimmed; a blank quantity is stored as null."""
        name = name.strip()
        if not name:
            raise ValueError("Ingredient name is required")

        data = {
            "user_id": self.user_id,
            "name": name,
            "quantity": _clean_quantity(quantity),
        }
        response = self.client.table(PANTRY_TABLE).insert(data).execute()
        return PantryItem.model_validate(response.data[0])

    def update(self, item_id: str, name: str, quantity: str | None = None) -> PantryItem:
        """Replace the name and quantity of an item. Other fields are untouched."""
        name = name.strip()
        if not name:
            raise ValueError("Ingredient name is required")

        response = (
            self.client.table(PANTRY_TABLE)
            .update({"name": name, "quantity": _clean_quantity(quantity)})
            .eq("id", item_id)
            .eq("user_id", self.user_id)  # Security: ensure user owns item
            .execute()
        )
        if not response.data:
            raise RowNotFound("Item not found")
        return PantryItem.model_validate(response.data[0])

    def delete(self, item_id: str) -> None:
        response = (
            self.client.table(PANTRY_TABLE)
            .delete()
            .eq("id", item_id)
            .eq("user_id", self.user_id)
            .execute()
        )
        if not response.data:
            raise RowNotFound("Item not found")


class SavedRecipeStore:
    """Saved recipes for one user. Rows are inserted and deleted, never updated."""

    def __init__(self, client: RowStoreClient, user_id: str):
        self.client = client
        self.user_id = user_id

    def list_all(self) -> list[SavedRecipe]:
        response = (
            self.client.table(SAVED_RECIPES_TABLE)
            .select("*")
            .eq("user_id", self.user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [SavedRecipe.model_validate(row) for row in response.data]

    def save(self, recipe: Recipe) -> SavedRecipe:
        """Copy a generated recipe into storage."""
        data = {"user_id": self.user_id, **recipe.model_dump()}
        response = self.client.table(SAVED_RECIPES_TABLE).insert(data).execute()
        saved = SavedRecipe.model_validate(response.data[0])
        logger.info(f"Saved recipe {saved.id} ({saved.title})")
        return saved

    def delete(self, recipe_id: str) -> None:
        response = (
            self.client.table(SAVED_RECIPES_TABLE)
            .delete()
            .eq("id", recipe_id)
            .eq("user_id", self.user_id)
            .execute()
        )
        if not response.data:
            raise RowNotFound("Recipe not found")
