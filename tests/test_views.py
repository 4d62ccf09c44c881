"""
Tests for view state: read-after-write and error notifications.
"""

from unittest.mock import MagicMock

import pytest

from pantry_chef.db.stores import PantryStore, SavedRecipeStore
from pantry_chef.models import Recipe
from pantry_chef.views import (
    MemoryNotifier,
    PantryView,
    RecipeGeneratorView,
    RecipeServiceError,
    SavedRecipesView,
)

USER = "user-1"


@pytest.fixture
def notifier():
    return MemoryNotifier()


@pytest.fixture
def pantry_store(fake_supabase):
    return PantryStore(fake_supabase, USER)


@pytest.fixture
def saved_store(fake_supabase):
    return SavedRecipeStore(fake_supabase, USER)


@pytest.fixture
def recipe():
    return Recipe(title="Soup", cooking_time="20 min", ingredients_used=["carrot"], steps=["chop", "boil"])


class TestPantryView:
    def test_add_rereads_list(self, pantry_store, notifier):
        view = PantryView(pantry_store, notifier)
        view.refresh()
        assert view.items == []

        view.add("tomato", "2")

        assert [i.name for i in view.items] == ["tomato"]
        assert notifier.last.title == "Added!"
        assert notifier.last.description == "tomato added to your pantry."

    def test_blank_name_is_ignored(self, pantry_store, notifier):
        view = PantryView(pantry_store, notifier)
        assert view.add("   ") is None
        assert pantry_store.list_all() == []
        assert notifier.notifications == []

    def test_update_and_delete_reread(self, pantry_store, notifier):
        view = PantryView(pantry_store, notifier)
        item = view.add("tomatoe")
        view.add("basil")

        view.update(item.id, "tomato", "4")
        assert {i.name for i in view.items} == {"tomato", "basil"}
        assert notifier.last.title == "Updated!"

        assert view.delete(item.id) is True
        assert [i.name for i in view.items] == ["basil"]
        assert notifier.last.title == "Removed from pantry."

    def test_failure_is_notified_and_view_keeps_working(self, pantry_store, notifier):
        view = PantryView(pantry_store, notifier)
        view.add("basil")

        assert view.delete("missing") is False
        assert notifier.last.variant == "destructive"
        assert notifier.last.description == "Item not found"

        view.add("thyme")
        assert [i.name for i in view.items] == ["thyme", "basil"]

    def test_store_exception_on_refresh_is_notified(self, notifier):
        store = MagicMock()
        store.list_all.side_effect = RuntimeError("network down")
        view = PantryView(store, notifier)

        assert view.refresh() == []
        assert notifier.last.title == "Error"
        assert notifier.last.description == "network down"
        assert view.loading is False

    def test_search_is_case_insensitive(self, pantry_store, notifier):
        view = PantryView(pantry_store, notifier)
        for name in ["Cherry Tomato", "basil", "tomato paste"]:
            view.add(name)

        assert {i.name for i in view.search("TOMATO")} == {"Cherry Tomato", "tomato paste"}
        assert len(view.search("")) == 3
        assert view.search("saffron") == []


class TestRecipeGeneratorView:
    def _view(self, pantry_store, saved_store, notifier, service):
        return RecipeGeneratorView(pantry_store, saved_store, service, notifier)

    def test_generate_sends_pantry_names(self, pantry_store, saved_store, notifier, recipe):
        pantry_store.add("carrot")
        pantry_store.add("onion")
        service = MagicMock()
        service.generate.return_value = [recipe, recipe, recipe]

        view = self._view(pantry_store, saved_store, notifier, service)
        view.load_ingredients()
        recipes = view.generate()

        service.generate.assert_called_once_with(["onion", "carrot"])
        assert len(recipes) == 3
        assert notifier.last.title == "Recipes generated!"
        assert notifier.last.description == "Found 3 recipes for you."

    def test_generate_failure_keeps_previous_recipes(self, pantry_store, saved_store, notifier, recipe):
        pantry_store.add("carrot")
        service = MagicMock()
        service.generate.return_value = [recipe]
        view = self._view(pantry_store, saved_store, notifier, service)
        view.load_ingredients()
        view.generate()

        service.generate.side_effect = RecipeServiceError("Rate limit exceeded. Please try again in a moment.", 429)
        recipes = view.generate()

        assert recipes == [recipe]
        assert notifier.last.variant == "destructive"
        assert notifier.last.description == "Rate limit exceeded. Please try again in a moment."

    def test_generate_with_empty_pantry_does_not_call_service(self, pantry_store, saved_store, notifier):
        service = MagicMock()
        view = self._view(pantry_store, saved_store, notifier, service)
        view.load_ingredients()

        assert view.generate() == []
        service.generate.assert_not_called()
        assert notifier.last.description == "Add some ingredients to your pantry first."

    def test_save_writes_to_saved_recipes(self, pantry_store, saved_store, notifier, recipe):
        view = self._view(pantry_store, saved_store, notifier, MagicMock())
        saved = view.save(recipe)

        assert saved is not None
        assert [r.title for r in saved_store.list_all()] == ["Soup"]
        assert notifier.last.title == "Recipe saved!"


class TestSavedRecipesView:
    def test_delete_rereads(self, saved_store, notifier, recipe):
        first = saved_store.save(recipe)
        saved_store.save(recipe.model_copy(update={"title": "Stew"}))

        view = SavedRecipesView(saved_store, notifier)
        view.refresh()
        assert len(view.recipes) == 2

        assert view.delete(first.id) is True
        assert [r.title for r in view.recipes] == ["Stew"]
        assert notifier.last.title == "Recipe removed."

    def test_delete_failure(self, saved_store, notifier):
        view = SavedRecipesView(saved_store, notifier)
        assert view.delete("missing") is False
        assert notifier.last.description == "Recipe not found"
