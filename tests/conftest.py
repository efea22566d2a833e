"""
Shared pytest fixtures.

- Every test starts and ends with a fresh abi_params config, so tests that set
  ABI_PARAMS_* variables through monkeypatch never leak strict mode or caps.
"""
from __future__ import annotations

import pytest

from abi_params.config import load_config


@pytest.fixture(autouse=True)
def _fresh_config():
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def strict_mode(monkeypatch: pytest.MonkeyPatch):
    """Enable construction-time checks for the duration of one test."""
    monkeypatch.setenv("ABI_PARAMS_STRICT", "1")
    load_config.cache_clear()
    yield load_config()
