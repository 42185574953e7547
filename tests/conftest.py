import os
import sys

import pytest

# Ensure src package path is importable without an install
SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

ENV_VARS = ('OPENWEATHER_API_KEY', 'OPENWEATHER_TIMEOUT', 'LOG_LEVEL')


@pytest.fixture
def clean_env(monkeypatch):
    """Remove weather variables and undo anything load_dotenv writes during the test."""
    for name in ENV_VARS:
        # setenv first so monkeypatch records the original state and restores it afterwards
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    return monkeypatch
