"""
Pantry Chef - Supabase Client.

Low-level database and auth access. The anonymous client owns the auth
session; table queries run on a client carrying the user's access token
so row-level security scopes every row to its owner.
"""

from supabase import Client, create_client

from pantry_chef.config import get_settings

# Singleton client instance
_client: Client | None = None


def get_client() -> Client:
    """
    Get the anonymous Supabase client.

    Uses singleton pattern to reuse connection.
    """
    global _client

    if _client is None:
        settings = get_settings()
        _client = create_client(
            settings.supabase_url,
            settings.supabase_anon_key,
        )

    return _client


def get_authenticated_client(access_token: str) -> Client:
    """
    Get a Supabase client whose table queries run as the given user.

    A new client per token; tokens change on refresh and sign-in.
    """
    settings = get_settings()
    client = create_client(settings.supabase_url, settings.supabase_anon_key)
    client.postgrest.auth(access_token)
    return client
