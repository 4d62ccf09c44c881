"""
Row store protocol.

The stores only need the Supabase/PostgREST fluent query builder:
table() returns a builder supporting .select(), .insert(), .update(),
.delete(), .eq(), .order() and .execute(). Tests pass an in-memory
implementation of the same surface.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RowStoreClient(Protocol):
    """Anything exposing a PostgREST-style table() builder."""

    def table(self, name: str) -> Any:
        """
        Return a query builder for the given table.

        .execute() on the finished query must return an object with .data.
        """
        ...
