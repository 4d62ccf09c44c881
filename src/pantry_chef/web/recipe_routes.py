"""
Generate-recipes endpoint.

Browser clients call this directly, so every response (errors included)
carries permissive CORS headers and OPTIONS answers the pre-flight.
"""

import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from pantry_chef.models import GenerateRecipesResponse
from pantry_chef.recipes import RecipeRequestError, generate_recipes
from pantry_chef.recipes.errors import InvalidRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["recipes"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": (
        "authorization, x-client-info, apikey, content-type, "
        "x-supabase-client-platform, x-supabase-client-platform-version, "
        "x-supabase-client-runtime, x-supabase-client-runtime-version"
    ),
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=CORS_HEADERS)


@router.options("/generate-recipes")
async def generate_recipes_preflight() -> Response:
    """CORS pre-flight: empty 200 with the CORS headers."""
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("/generate-recipes")
async def generate_recipes_endpoint(request: Request) -> JSONResponse:
    """
    Generate 3-5 vegetarian recipes from a list of ingredient names.

    Body: {"ingredients": ["carrot", "lentils", ...]}
    Returns {"recipes": [...]} or {"error": "..."}.
    """
    try:
        try:
            payload = await request.json()
        except ValueError as e:
            raise InvalidRequest() from e

        recipes = await generate_recipes(payload)
    except RecipeRequestError as e:
        return error_response(e.status_code, e.message)
    except Exception as e:
        logger.exception("generate-recipes error")
        return error_response(500, str(e) or "Unknown error")

    body = GenerateRecipesResponse(recipes=recipes)
    return JSONResponse(content=body.model_dump(), headers=CORS_HEADERS)
