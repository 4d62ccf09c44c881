"""
Pytest configuration and fixtures for Pantry Chef tests.
"""

import copy
import itertools
import os
import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set test environment before importing pantry_chef modules
os.environ["PANTRY_ENV"] = "development"
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key-not-real")

from pantry_chef.config import get_core_settings, get_settings
from pantry_chef.llm import prompt_logger


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Fresh settings per test; gateway key present unless a test removes it."""
    monkeypatch.setenv("AI_GATEWAY_API_KEY", "test-gateway-key")
    monkeypatch.delenv("PANTRY_LOG_PROMPTS", raising=False)
    get_core_settings.cache_clear()
    get_settings.cache_clear()
    prompt_logger.reset_session()
    yield
    get_core_settings.cache_clear()
    get_settings.cache_clear()
    prompt_logger.reset_session()


# =============================================================================
# In-memory Supabase table builder
# =============================================================================


class FakeQuery:
    """Supports the subset of the PostgREST builder the stores use."""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.op = "select"
        self.payload = None
        self.filters: list[tuple[str, object]] = []
        self.order_by: tuple[str, bool] | None = None

    def select(self, *_columns):
        self.op = "select"
        return self

    def insert(self, data):
        self.op = "insert"
        self.payload = data
        return self

    def update(self, data):
        self.op = "update"
        self.payload = data
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def _matches(self, row: dict) -> bool:
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self):
        rows = self.db.tables.setdefault(self.table, [])

        if self.op == "insert":
            new_rows = self.payload if isinstance(self.payload, list) else [self.payload]
            created = []
            for data in new_rows:
                row = {
                    "id": str(uuid.uuid4()),
                    "created_at": self.db.next_timestamp().isoformat(),
                    **copy.deepcopy(data),
                }
                rows.append(row)
                created.append(copy.deepcopy(row))
            return SimpleNamespace(data=created)

        matched = [row for row in rows if self._matches(row)]

        if self.op == "update":
            for row in matched:
                row.update(copy.deepcopy(self.payload))
            return SimpleNamespace(data=copy.deepcopy(matched))

        if self.op == "delete":
            self.db.tables[self.table] = [row for row in rows if not self._matches(row)]
            return SimpleNamespace(data=copy.deepcopy(matched))

        result = copy.deepcopy(matched)
        if self.order_by:
            column, desc = self.order_by
            result.sort(key=lambda r: r[column], reverse=desc)
        return SimpleNamespace(data=result)


class FakeSupabase:
    def __init__(self):
        self.tables: dict[str, list[dict]] = {}
        self._clock = itertools.count()
        self._epoch = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def next_timestamp(self) -> datetime:
        return self._epoch + timedelta(seconds=next(self._clock))

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


# =============================================================================
# AI gateway
# =============================================================================


@pytest.fixture
def make_completion():
    """Build objects shaped like a ChatCompletion with one choice."""

    def _make(content):
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])

    return _make


@pytest.fixture
def mock_openai():
    """Mock AsyncOpenAI client; set .create.return_value / side_effect per test."""
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock()
    return mock_client


@pytest.fixture
def sample_recipes_json():
    return """[
  {"title": "Tomato Basil Pasta", "cooking_time": "25 minutes",
   "ingredients_used": ["pasta", "tomato", "basil"],
   "steps": ["Boil pasta", "Simmer tomatoes", "Toss with basil"]},
  {"title": "Caprese Salad", "cooking_time": "10 minutes",
   "ingredients_used": ["tomato", "basil", "mozzarella"],
   "steps": ["Slice", "Layer", "Drizzle with oil"]},
  {"title": "Tomato Soup", "cooking_time": "40 minutes",
   "ingredients_used": ["tomato", "onion"],
   "steps": ["Sweat onion", "Add tomatoes", "Blend"]}
]"""
