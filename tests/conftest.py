"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from quest.engine.storage import LineFileStore
from quest.engine.store import GoalStore
from quest.main import app
from quest.state import get_line_store, get_store


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def store() -> GoalStore:
    """A fresh store with default (lenient) simple-goal awards."""
    return GoalStore()


@pytest.fixture()
def line_store(tmp_path) -> LineFileStore:
    return LineFileStore(tmp_path / "saves")


@pytest.fixture()
def override_state(store, line_store):
    """Point the FastAPI dependencies at the per-test store and save dir."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_line_store] = lambda: line_store
    yield store
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(override_state):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def populate(store: GoalStore) -> GoalStore:
    """Add one goal of each kind: simple, eternal, checklist (target 3, bonus 50)."""
    store.add_goal("SimpleGoal", "Marathon", "Run a marathon", 1000)
    store.add_goal("EternalGoal", "Scriptures", "Read scriptures", 100)
    store.add_goal("ChecklistGoal", "Temple", "Attend the temple", 10, target=3, bonus=50)
    return store
