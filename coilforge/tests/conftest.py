import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from coilforge.config import _ENV_VARS, get_settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Run every test against default settings, regardless of the caller's environment."""
    for env_var in _ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
