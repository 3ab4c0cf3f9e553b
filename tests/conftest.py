from __future__ import annotations

import pytest

from evented.config import reset_config


@pytest.fixture(autouse=True)
def _reset_evented_config():
    """Keep process-wide configuration changes from leaking between tests."""
    reset_config()
    yield
    reset_config()
