"""
Recipe generation: ingredients in, candidate recipes out.

Stateless. Each call validates the request, builds the prompt, makes one
chat-completion call and parses the reply. Failures are raised as
RecipeRequestError subclasses; nothing is persisted here.
"""

import logging
from typing import Any

import openai
from pydantic import ValidationError

from pantry_chef.config import get_core_settings
from pantry_chef.llm import client as llm
from pantry_chef.models import GenerateRecipesRequest, Recipe
from pantry_chef.recipes.errors import (
    ConfigError,
    EmptyResponse,
    InvalidRequest,
    QuotaExceeded,
    RateLimited,
    UpstreamError,
)
from pantry_chef.recipes.parser import parse_recipes
from pantry_chef.recipes.prompts import build_messages

logger = logging.getLogger(__name__)


def validate_request(payload: Any) -> GenerateRecipesRequest:
    """Check that the body carries a non-empty list of ingredient names."""
    if not isinstance(payload, dict):
        raise InvalidRequest()
    try:
        return GenerateRecipesRequest.model_validate(payload)
    except ValidationError as e:
        raise InvalidRequest() from e


async def generate_recipes(payload: Any) -> list[Recipe]:
    """
    Turn a request body into a list of recipes.

    Order of checks:
        1. request shape (InvalidRequest)
        2. gateway credential (ConfigError)
        3. upstream call (RateLimited, QuotaExceeded, UpstreamError)
        4. reply content (EmptyResponse, ParseError)
    """
    request = validate_request(payload)

    api_key = get_core_settings().ai_gateway_api_key
    if not api_key:
        raise ConfigError()

    system_prompt, user_prompt = build_messages(request.ingredients)

    try:
        content = await llm.call_chat(
            api_key=api_key,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
        )
    except openai.APIStatusError as e:
        if e.status_code == 429:
            raise RateLimited() from e
        if e.status_code == 402:
            raise QuotaExceeded() from e
        logger.error(f"AI gateway error: {e.status_code} {e.response.text}")
        raise UpstreamError() from e
    except openai.APIError as e:
        logger.error(f"AI gateway request failed: {e}")
        raise UpstreamError() from e

    if not content:
        raise EmptyResponse()

    recipes = parse_recipes(content)
    logger.info(f"Generated {len(recipes)} recipes from {len(request.ingredients)} ingredients")
    return recipes
