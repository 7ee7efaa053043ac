"""
Unit tests for database URL handling.
"""

import pytest

from inventory.core.database import sync_database_url


@pytest.mark.parametrize(
    "async_url, sync_url",
    [
        ("postgresql+asyncpg://user:p%40ss@db:5432/inventory",
         "postgresql+psycopg2://user:p%40ss@db:5432/inventory"),
        ("sqlite+aiosqlite:///./inventory.db", "sqlite:///./inventory.db"),
        ("postgresql+psycopg2://user@db/inventory", "postgresql+psycopg2://user@db/inventory"),
    ],
)
def test_sync_database_url(async_url, sync_url):
    assert sync_database_url(async_url) == sync_url
