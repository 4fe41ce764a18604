# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Shared pytest configuration for all unit tests.

Applies the `unit` marker to every test under tests/unit/ so individual
files do not need to set pytestmark.

    # Run only unit tests
    pytest -m unit
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Dynamically add unit marker to all tests in the unit directory.

    pytestmark defined in conftest.py does NOT apply to tests in other
    files, so the marker is added after collection instead.
    """
    unit_marker = pytest.mark.unit

    for item in items:
        if "tests/unit" in str(item.path).replace("\\", "/"):
            if not any(marker.name == "unit" for marker in item.iter_markers()):
                item.add_marker(unit_marker)
