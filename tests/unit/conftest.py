"""Default marks and hypothesis settings for tests under `tests/unit/`."""

from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

# pylint: disable=unused-argument

UNIT_ROOT = Path(__file__).parent.resolve()

settings.register_profile(
    "generic-functions-unit",
    max_examples=60,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile("generic-functions-unit")


def _is_unit_test(item: pytest.Item) -> bool:
    return UNIT_ROOT in item.path.resolve().parents


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark unmarked items collected below `tests/unit/` as `unit` tests."""
    unit_items = [item for item in items if _is_unit_test(item)]
    for item in unit_items:
        if item.get_closest_marker("unit") is None:
            item.add_marker(pytest.mark.unit)
