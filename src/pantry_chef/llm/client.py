"""
Pantry Chef - LLM Client.

Wraps the OpenAI SDK pointed at an OpenAI-compatible AI gateway.
All chat-completion calls go through here for consistency and logging.

Retries are disabled on the client: a 429/402/5xx from the gateway is
surfaced to the caller immediately.
"""

from openai import AsyncOpenAI

from pantry_chef.config import get_core_settings
from pantry_chef.llm.prompt_logger import log_prompt

# Singleton client instance, rebuilt when the key or gateway changes
_client: AsyncOpenAI | None = None
_client_identity: tuple[str, str] | None = None


def get_client(api_key: str) -> AsyncOpenAI:
    """
    Get the gateway client.

    Uses singleton pattern to reuse the connection pool.
    """
    global _client, _client_identity

    base_url = get_core_settings().ai_gateway_url
    identity = (api_key, base_url)

    if _client is None or _client_identity != identity:
        _client = AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)
        _client_identity = identity

    return _client


async def call_chat(
    *,
    api_key: str,
    system_prompt: str,
    user_prompt: str,
    model: str | None = None,
) -> str | None:
    """
    Make a single non-streaming chat-completion call.

    Args:
        api_key: Gateway bearer token
        system_prompt: System message setting context
        user_prompt: User message with the actual request
        model: Model id, defaults to the configured ai_model

    Returns:
        The assistant message text, or None if the reply has no content.

    Raises:
        openai.APIError subclasses, unchanged.
    """
    client = get_client(api_key)
    model = model or get_core_settings().ai_model

    messages = [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]

    try:
        completion = await client.chat.completions.create(
            model=model,
            messages=messages,
        )
    except Exception as e:
        log_prompt(
            model=model,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            error=str(e),
        )
        raise

    content = None
    if completion.choices:
        content = completion.choices[0].message.content

    log_prompt(
        model=model,
        system_prompt=system_prompt,
        user_prompt=user_prompt,
        response=content,
    )
    return content
