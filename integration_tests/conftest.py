"""Pytest configuration for integration tests.

Run only these with ``pytest -m integration``, or skip them with
``pytest -m "not integration"``.
"""

import pytest


def pytest_collection_modifyitems(items):
    """Mark everything collected from this directory as integration."""
    for item in items:
        if "integration_tests" in str(item.path):
            item.add_marker(pytest.mark.integration)
