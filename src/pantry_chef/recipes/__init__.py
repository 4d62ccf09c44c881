"""Recipe generation from pantry ingredients."""

from pantry_chef.recipes.errors import (
    ConfigError,
    EmptyResponse,
    InvalidRequest,
    ParseError,
    QuotaExceeded,
    RateLimited,
    RecipeRequestError,
    UpstreamError,
)
from pantry_chef.recipes.generator import generate_recipes, validate_request
from pantry_chef.recipes.parser import parse_bracketed, parse_recipes, parse_strict

__all__ = [
    "generate_recipes",
    "validate_request",
    "parse_recipes",
    "parse_strict",
    "parse_bracketed",
    "RecipeRequestError",
    "InvalidRequest",
    "ConfigError",
    "RateLimited",
    "QuotaExceeded",
    "UpstreamError",
    "EmptyResponse",
    "ParseError",
]
