"""Shared fixtures for API tests."""

import os
import sys

import pytest

# The backend modules import each other as top-level modules
backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
project_root = os.path.abspath(os.path.join(backend_dir, ".."))
for path in (project_root, backend_dir):
    if path not in sys.path:
        sys.path.insert(0, path)

from fastapi.testclient import TestClient  # noqa: E402


@pytest.fixture
def app_module():
    import app

    return app


@pytest.fixture
def client(app_module):
    with TestClient(app_module.app) as test_client:
        yield test_client


@pytest.fixture
def settings(app_module, monkeypatch):
    """Fresh helper settings installed for the duration of a test."""
    fresh = app_module.create_settings()
    monkeypatch.setattr(app_module, "helper_settings", fresh)
    return fresh
