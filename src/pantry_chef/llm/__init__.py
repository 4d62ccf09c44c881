"""
Pantry Chef - LLM Client.

Provides chat-completion calls against the AI gateway.
"""

from pantry_chef.llm.client import call_chat, get_client

__all__ = [
    "get_client",
    "call_chat",
]
