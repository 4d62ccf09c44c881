"""View state for the pantry, the recipe generator and saved recipes."""

from pantry_chef.views.notifications import (
    ConsoleNotifier,
    MemoryNotifier,
    Notification,
    Notifier,
)
from pantry_chef.views.pantry import PantryView
from pantry_chef.views.recipe_service import RecipeServiceClient, RecipeServiceError
from pantry_chef.views.recipes import RecipeGeneratorView, SavedRecipesView

__all__ = [
    "Notification",
    "Notifier",
    "MemoryNotifier",
    "ConsoleNotifier",
    "PantryView",
    "RecipeGeneratorView",
    "SavedRecipesView",
    "RecipeServiceClient",
    "RecipeServiceError",
]
