import numpy as np
import pytest

SETTINGS_VARS = ["NATBREAKS_DEFAULT_CLASSES", "NATBREAKS_LOG_LEVEL"]


@pytest.fixture
def clustered_values():
    """Two well separated clusters of three values each."""
    return [1.0, 2.0, 3.0, 100.0, 101.0, 102.0]


@pytest.fixture
def rng():
    return np.random.default_rng(0x5EED)


@pytest.fixture
def clean_env(monkeypatch):
    """Removes natbreaks variables from the environment for the duration of a test."""
    for name in SETTINGS_VARS:
        # setenv first so teardown removes anything load_dotenv writes
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
