"""
Pantry Chef Web - FastAPI application.

Hosts the generate-recipes function. Pantry and saved-recipe CRUD goes
straight from the client to Supabase and does not pass through here.
"""

import logging

from fastapi import FastAPI

from pantry_chef import __version__
from pantry_chef.web.recipe_routes import router as recipe_router

logger = logging.getLogger(__name__)

app = FastAPI(title="Pantry Chef", version=__version__)


@app.on_event("startup")
async def startup_event():
    """Log configuration on startup."""
    from pantry_chef.config import get_core_settings
    from pantry_chef.llm.prompt_logger import is_prompt_logging_enabled

    settings = get_core_settings()
    logger.info("Pantry Chef starting up...")
    logger.info(f"  Environment: {settings.pantry_env}")
    logger.info(f"  Model: {settings.ai_model}")
    logger.info(f"  Gateway key configured: {bool(settings.ai_gateway_api_key)}")
    logger.info(f"  Prompt file logging: {is_prompt_logging_enabled()}")


app.include_router(recipe_router, prefix="/functions/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


def create_app() -> FastAPI:
    """Create and return the FastAPI application."""
    return app
