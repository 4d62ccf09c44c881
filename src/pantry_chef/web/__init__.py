"""Pantry Chef web API."""
