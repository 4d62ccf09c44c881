"""
HTTP client for the generate-recipes endpoint.

Error responses carry {"error": message}; the message is raised as
RecipeServiceError so views can show it unchanged.
"""

import logging

import httpx

from pantry_chef.models import GenerateRecipesResponse, Recipe

logger = logging.getLogger(__name__)


class RecipeServiceError(Exception):
    """The generate-recipes endpoint returned an error or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class RecipeServiceClient:
    """Calls POST <function_url> with the user's bearer token."""

    def __init__(
        self,
        function_url: str,
        access_token: str | None = None,
        http_client: httpx.Client | None = None,
    ):
        self.function_url = function_url
        self.access_token = access_token
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=None)

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "RecipeServiceClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def generate(self, ingredients: list[str]) -> list[Recipe]:
        headers = {"Content-Type": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        try:
            response = self._http.post(
                self.function_url,
                json={"ingredients": ingredients},
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.warning(f"generate-recipes request failed: {e}")
            raise RecipeServiceError(f"Could not reach recipe service: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise RecipeServiceError(
                f"Recipe service returned HTTP {response.status_code}",
                status_code=response.status_code,
            ) from e

        if not isinstance(body, dict):
            raise RecipeServiceError(
                f"Recipe service returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        if response.is_error or "error" in body:
            raise RecipeServiceError(
                body.get("error") or f"Recipe service returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        return GenerateRecipesResponse.model_validate(body).recipes
