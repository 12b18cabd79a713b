from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from core.storage import MemStorage
from main import app, get_storage
from models import StartupSubmission


def base_payload(**overrides: Any) -> dict:
    """A valid form body as the client sends it (camelCase keys)."""
    payload = {
        "startupName": "GlucoGuide",
        "firstName": "Ada",
        "lastName": "Okafor",
        "targetAudience": "Adults newly diagnosed with type 2 diabetes",
        "diabetesTypes": ["Type 2 Diabetes (T2D)"],
        "problemStatement": "Newly diagnosed patients feel overwhelmed by daily tracking.",
        "solutionStatement": "A guided logging companion that turns readings into weekly coaching.",
    }
    payload.update(overrides)
    return payload


def make_submission(**overrides: Any) -> StartupSubmission:
    """Minimal valid submission; overrides use snake_case field names."""
    fields = {
        "startup_name": "GlucoGuide",
        "first_name": "Ada",
        "last_name": "Okafor",
        "target_audience": "Adults newly diagnosed with type 2 diabetes",
        "diabetes_types": ["Type 2 Diabetes (T2D)"],
        "problem_statement": "Newly diagnosed patients feel overwhelmed by daily tracking.",
        "solution_statement": "A guided logging companion that turns readings into weekly coaching.",
    }
    fields.update(overrides)
    return StartupSubmission(**fields)


@pytest.fixture
def storage() -> MemStorage:
    return MemStorage()


@pytest.fixture
def client(storage: MemStorage):
    app.dependency_overrides[get_storage] = lambda: storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
