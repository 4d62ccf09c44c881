"""Prompt text for recipe generation."""

SYSTEM_PROMPT_TEMPLATE = """You are a professional chef. Using primarily these ingredients: {ingredients}, generate 3–5 vegetarian recipes.
Return ONLY valid JSON array with fields: title, cooking_time, ingredients_used (array of strings), steps (array of strings).
Do not include any markdown formatting, code blocks, or extra text. Just the raw JSON array."""

USER_PROMPT_TEMPLATE = "Generate vegetarian recipes using these ingredients: {ingredients}"


def format_ingredient_list(ingredients: list[str]) -> str:
    """Join ingredient names into one comma-separated string."""
    return ", ".join(ingredients)


def build_messages(ingredients: list[str]) -> tuple[str, str]:
    """Return the (system, user) prompt pair for an ingredient list."""
    ingredient_list = format_ingredient_list(ingredients)
    return (
        SYSTEM_PROMPT_TEMPLATE.format(ingredients=ingredient_list),
        USER_PROMPT_TEMPLATE.format(ingredients=ingredient_list),
    )
