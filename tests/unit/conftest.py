"""Pytest fixtures for unit and API tests."""

import pytest
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from storybook.api.dependencies import get_print_order_client
from storybook.api.main import app
from storybook.core.print_orders import PrintOrderClient
from storybook.core.types import Page, PageSizePreset, ReadingLevel, StoryConfig


def words(count: int, word: str = "word") -> str:
    """Text with exactly ``count`` words."""
    return " ".join([word] * count)


def char_width(text: str, font_size: float) -> float:
    """Deterministic measure: every character is one unit wide."""
    return float(len(text))


@pytest.fixture
def story_config():
    """A fully filled-in configuration."""
    return StoryConfig(
        children=["Emma", "Sam"],
        story_type="Adventure",
        setting="Enchanted forest",
        characters=["Friendly dog", "Gentle dragon"],
        reading_level=ReadingLevel.EARLY,
        page_size=PageSizePreset.A5_PORTRAIT,
        length_pages=10,
        content_safety=True,
        theme_preset="Calm pastels",
        dedication="For our brave explorers",
    )


@pytest.fixture
def ready_pages():
    """Three pages that pass export validation at the Early 4-5 level."""
    return [
        Page(page_number=1, text=words(100), image_url="https://img.example/1.png"),
        Page(page_number=2, text=words(90), image_locked=True),
        Page(page_number=3, text=words(110), image_url="https://img.example/3.png"),
    ]


@pytest.fixture
def mock_print_client():
    """A mock print order client."""
    return AsyncMock(spec=PrintOrderClient)


@pytest.fixture
def client():
    """TestClient with real dependencies."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def client_with_mocks(mock_print_client):
    """TestClient with a mocked print order client."""
    app.dependency_overrides[get_print_order_client] = lambda: mock_print_client

    with TestClient(app) as client:
        yield client, mock_print_client

    app.dependency_overrides.clear()
