"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- Analyzer, generator and service instances
- Sample markup documents
- FastAPI test client
"""

import pytest
from fastapi.testclient import TestClient

from shrink_tailwind.analyzers import AttributeLocator, TailwindClassifier
from shrink_tailwind.core.config import settings
from shrink_tailwind.generator import RuleGenerator
from shrink_tailwind.main import app
from shrink_tailwind.services.extraction_service import ExtractionService


# ---------------------------------------------------------------------------
# CORE FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def locator() -> AttributeLocator:
    """AttributeLocator with the default lookaround."""
    return AttributeLocator()


@pytest.fixture
def classifier() -> TailwindClassifier:
    """TailwindClassifier instance."""
    return TailwindClassifier()


@pytest.fixture
def generator() -> RuleGenerator:
    """RuleGenerator instance."""
    return RuleGenerator()


@pytest.fixture
def service() -> ExtractionService:
    """ExtractionService with default collaborators."""
    return ExtractionService()


# ---------------------------------------------------------------------------
# SAMPLE DOCUMENTS
# ---------------------------------------------------------------------------

@pytest.fixture
def button_line() -> str:
    """A button with six classes, one of them a hover variant."""
    return (
        '<button class="px-4 py-2 bg-blue-600 text-white rounded '
        'hover:bg-blue-700">Save</button>'
    )


@pytest.fixture
def wrapped_document() -> str:
    """A class attribute wrapped across two lines."""
    return (
        "<div\n"
        '  class="flex items-center\n'
        '    p-4 bg-white"\n'
        ">"
    )


# ---------------------------------------------------------------------------
# API FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Point WORKSPACE_ROOT at a temporary directory."""
    monkeypatch.setattr(settings, "WORKSPACE_ROOT", str(tmp_path))
    return tmp_path


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client."""
    return TestClient(app)
