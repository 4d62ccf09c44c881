"""
Error taxonomy for recipe generation.

Every error carries the HTTP status and the public message sent back to the
caller as {"error": message}. Diagnostic detail is logged, never returned.
"""


class RecipeRequestError(Exception):
    """Base class for failures of a generate-recipes request."""

    status_code: int = 500
    message: str = "Failed to generate recipes"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidRequest(RecipeRequestError):
    """Caller input is missing or malformed."""

    status_code = 400
    message = "Please provide at least one ingredient"


class ConfigError(RecipeRequestError):
    """A required credential is not configured."""

    status_code = 500
    message = "AI_GATEWAY_API_KEY is not configured"


class RateLimited(RecipeRequestError):
    """The AI gateway is throttling requests."""

    status_code = 429
    message = "Rate limit exceeded. Please try again in a moment."


class QuotaExceeded(RecipeRequestError):
    """The AI gateway billing limit was reached."""

    status_code = 402
    message = "AI usage limit reached. Please add credits."


class UpstreamError(RecipeRequestError):
    """Any other AI gateway failure."""

    status_code = 500
    message = "Failed to generate recipes"


class EmptyResponse(RecipeRequestError):
    """The gateway answered without assistant content."""

    status_code = 500
    message = "No recipes generated"


class ParseError(RecipeRequestError):
    """The assistant content is not a JSON array of recipes."""

    status_code = 500
    message = "Failed to parse recipe data"
