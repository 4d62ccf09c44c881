"""
Recipe generator and saved-recipes view state.
"""

import logging

from pantry_chef.db.stores import PantryStore, SavedRecipeStore
from pantry_chef.models import PantryItem, Recipe, SavedRecipe
from pantry_chef.views.notifications import Notification, Notifier, error_notification
from pantry_chef.views.recipe_service import RecipeServiceClient

logger = logging.getLogger(__name__)


class RecipeGeneratorView:
    """
    Generates recipes from the current pantry.

    Generated recipes are transient; only save() writes anything.
    """

    def __init__(
        self,
        pantry_store: PantryStore,
        saved_store: SavedRecipeStore,
        service: RecipeServiceClient,
        notifier: Notifier,
    ):
        self.pantry_store = pantry_store
        self.saved_store = saved_store
        self.service = service
        self.notifier = notifier
        self.pantry_items: list[PantryItem] = []
        self.recipes: list[Recipe] = []

    def load_ingredients(self) -> list[PantryItem]:
        try:
            self.pantry_items = self.pantry_store.list_all()
        except Exception as e:
            self.notifier.notify(error_notification(e))
        return self.pantry_items

    def generate(self) -> list[Recipe]:
        """Ask the recipe service for recipes built from the pantry item names."""
        ingredients = [item.name for item in self.pantry_items]
        if not ingredients:
            self.notifier.notify(
                Notification(
                    title="No ingredients",
                    description="Add some ingredients to your pantry first.",
                    variant="destructive",
                )
            )
            return self.recipes

        try:
            self.recipes = self.service.generate(ingredients)
        except Exception as e:
            logger.warning(f"Recipe generation failed: {e}")
            self.notifier.notify(error_notification(e))
            return self.recipes

        self.notifier.notify(
            Notification(
                title="Recipes generated!",
                description=f"Found {len(self.recipes)} recipes for you.",
            )
        )
        return self.recipes

    def save(self, recipe: Recipe) -> SavedRecipe | None:
        try:
            saved = self.saved_store.save(recipe)
        except Exception as e:
            self.notifier.notify(error_notification(e))
            return None

        self.notifier.notify(Notification(title="Recipe saved!"))
        return saved


class SavedRecipesView:
    """Lists and deletes saved recipes, re-reading after each delete."""

    def __init__(self, store: SavedRecipeStore, notifier: Notifier):
        self.store = store
        self.notifier = notifier
        self.recipes: list[SavedRecipe] = []

    def refresh(self) -> list[SavedRecipe]:
        try:
            self.recipes = self.store.list_all()
        except Exception as e:
            self.notifier.notify(error_notification(e))
        return self.recipes

    def delete(self, recipe_id: str) -> bool:
        try:
            self.store.delete(recipe_id)
        except Exception as e:
            self.notifier.notify(error_notification(e))
            return False

        self.refresh()
        self.notifier.notify(Notification(title="Recipe removed."))
        return True
