"""Explicit auth session state."""

from pantry_chef.session.auth_context import AuthContext, AuthResult

__all__ = ["AuthContext", "AuthResult"]
