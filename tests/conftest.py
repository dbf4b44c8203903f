"""Pytest fixtures and configuration for duewatch tests."""

import pytest
from datetime import date
from fastapi.testclient import TestClient
import uuid

from duewatch.api.app import app


@pytest.fixture
def today():
    """Fixed "now" used across evaluator tests."""
    return date(2026, 1, 29)


@pytest.fixture
def sample_task_base():
    """Base task data for creating test tasks.

    Returns a dict with default task attributes that can be overridden.
    """
    return {
        "id": str(uuid.uuid4()),
        "title": "Test Task",
        "due_date": None,
        "completed": False,
    }


@pytest.fixture
def test_client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def _no_time_authority_env(monkeypatch):
    """Keep a developer's .env from pointing tests at a real authority."""
    monkeypatch.delenv("TIME_AUTHORITY_URL", raising=False)
    monkeypatch.delenv("TIME_AUTHORITY_TIMEOUT_SEC", raising=False)
