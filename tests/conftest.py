"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so tests import open_closed_linter and the
shared helpers under tests/.
"""

import pytest

from open_closed_linter.infrastructure.di.container import OpenClosedContainer


@pytest.fixture(autouse=True)
def _fresh_container():
    """Each test sees a freshly built plugin container."""
    OpenClosedContainer.reset_instance()
    yield
    OpenClosedContainer.reset_instance()
