"""
Pantry Chef - Configuration and settings.

CoreSettings contains only what the recipe endpoint needs.
AppSettings adds the Supabase and CLI fields used by the views.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class CoreSettings(BaseSettings):
    """
    Settings for the generate-recipes endpoint.

    The gateway key is optional here so that a missing key is reported
    per request as a ConfigError instead of failing app startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # AI gateway (OpenAI-compatible chat completions)
    ai_gateway_api_key: str | None = None
    ai_gateway_url: str = "https://ai.gateway.lovable.dev/v1"
    ai_model: str = "google/gemini-3-flash-preview"

    # Application
    pantry_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # PANTRY_LOG_PROMPTS=1 - log prompts to local files (dev only)
    pantry_log_prompts: bool = False

    @property
    def is_development(self) -> bool:
        return self.pantry_env == "development"

    @property
    def is_production(self) -> bool:
        return self.pantry_env == "production"


class AppSettings(CoreSettings):
    """
    Client-side settings.

    Extends CoreSettings with the Supabase project, the deployed
    generate-recipes URL and where the CLI keeps its session.
    """

    # Supabase
    supabase_url: str
    supabase_anon_key: str

    # Where the views send generation requests
    recipe_function_url: str = "http://localhost:8000/functions/v1/generate-recipes"

    # Persisted auth session for the CLI
    session_file: Path = Path.home() / ".pantry_chef" / "session.json"


@lru_cache
def get_core_settings() -> CoreSettings:
    """Get cached CoreSettings instance (no Supabase fields required)."""
    return CoreSettings()


@lru_cache
def get_settings() -> AppSettings:
    """Get cached AppSettings instance."""
    return AppSettings()
