"""Global pytest fixtures for WORDCAP."""

import pytest

from wordcap import config


@pytest.fixture
def demo_items() -> list[str | None]:
    """Return a mutable copy of the demonstration list."""
    return list(config.DEMO_ITEMS)
