"""Mark everything collected under `tests/unit/` as a `unit` test."""

from pathlib import Path

import pytest

UNIT_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Add the `unit` mark to unmarked items that live below UNIT_ROOT."""
    for item in items:
        if UNIT_ROOT not in item.path.resolve().parents:
            continue
        if item.get_closest_marker("unit") is None:
            item.add_marker(pytest.mark.unit)
