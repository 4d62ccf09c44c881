"""
Pantry Chef - Data models.

PantryItem and SavedRecipe mirror rows in the Supabase tables.
Recipe is the transient shape returned by the generate-recipes endpoint.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PantryItem(BaseModel):
    """A single ingredient entry owned by a user."""

    model_config = ConfigDict(extra="ignore")

    id: str
    user_id: str
    name: str = Field(..., min_length=1)
    quantity: str | None = None
    created_at: datetime


class Recipe(BaseModel):
    """
    A generated, unsaved recipe suggestion.

    Parsing is permissive: missing or null list fields become empty lists
    and scalar list members are coerced to strings. Only a missing or empty
    title is rejected.
    """

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1)
    cooking_time: str = ""
    ingredients_used: list[str] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("cooking_time", mode="before")
    @classmethod
    def _coerce_cooking_time(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("ingredients_used", "steps", mode="before")
    @classmethod
    def _coerce_string_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [str(v) if isinstance(v, (int, float)) else v for v in value]
        return value


class SavedRecipe(Recipe):
    """A persisted copy of a recipe chosen by the user."""

    id: str
    user_id: str
    created_at: datetime

    def to_recipe(self) -> Recipe:
        return Recipe(
            title=self.title,
            cooking_time=self.cooking_time,
            ingredients_used=list(self.ingredients_used),
            steps=list(self.steps),
        )


class GenerateRecipesRequest(BaseModel):
    """Body of POST /functions/v1/generate-recipes."""

    ingredients: list[str] = Field(..., min_length=1)


class GenerateRecipesResponse(BaseModel):
    """Successful response of the generate-recipes endpoint."""

    recipes: list[Recipe]
