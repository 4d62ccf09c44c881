"""
Tolerant extraction of recipes from model output.

Models are told to answer with a bare JSON array but often wrap it in prose
or a ```json fence. Parsing runs in two stages:

1. parse_strict: the whole text must be a JSON array.
2. parse_bracketed: the span from the first "[" to the last "]" must be
   a JSON array.

If neither yields a list, ParseError is raised. Each element is then
validated into a Recipe (see Recipe for the coercion rules).
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from pantry_chef.models import Recipe
from pantry_chef.recipes.errors import ParseError

logger = logging.getLogger(__name__)


def parse_strict(content: str) -> list[Any] | None:
    """Parse the full text as a JSON array. Returns None if it is not one."""
    try:
        data = json.loads(content)
    except ValueError:
        return None
    return data if isinstance(data, list) else None


def parse_bracketed(content: str) -> list[Any] | None:
    """Parse the first "[" through the last "]" as a JSON array."""
    start = content.find("[")
    end = content.rfind("]")
    if start == -1 or end <= start:
        return None
    return parse_strict(content[start : end + 1])


def extract_recipe_array(content: str) -> list[Any]:
    """Run both parse stages and return the raw recipe array."""
    data = parse_strict(content)
    if data is None:
        data = parse_bracketed(content)
    if data is None:
        logger.error(f"Failed to parse recipes: {content}")
        raise ParseError()
    return data


def parse_recipes(content: str) -> list[Recipe]:
    """Extract and validate recipes from assistant content."""
    data = extract_recipe_array(content)
    try:
        return [Recipe.model_validate(item) for item in data]
    except ValidationError as e:
        logger.error(f"Recipe data has an unexpected shape: {e}\n{content}")
        raise ParseError() from e
