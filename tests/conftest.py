"""Shared pytest fixtures."""

import pytest

from tabfuzz.config import EngineConfig, set_config


@pytest.fixture(autouse=True)
def default_engine_config():
    """Run every test with the built-in configuration, whatever TABFUZZ_* says."""
    set_config(EngineConfig())
    yield
    set_config(None)
