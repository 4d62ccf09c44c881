"""
Pantry Chef - Database access.

Supabase clients plus the pantry and saved-recipe stores.
"""

from pantry_chef.db.client import get_authenticated_client, get_client
from pantry_chef.db.stores import PantryStore, RowNotFound, SavedRecipeStore

__all__ = [
    "get_client",
    "get_authenticated_client",
    "PantryStore",
    "SavedRecipeStore",
    "RowNotFound",
]
