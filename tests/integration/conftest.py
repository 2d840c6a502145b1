"""Integration fixtures: a throwaway SQLite database per test."""

import pytest

from src.infrastructure.persistence import Database


@pytest.fixture
async def database(tmp_path):
    """File-backed SQLite database with every table created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'dashboard.db'}")
    await db.create_all()
    yield db
    await db.close()
