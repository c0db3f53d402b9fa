"""Shared fixtures for runline tests."""

import os

import pytest

from runline.configurations.settings import AnsibleSettings, get_settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    """Keep RUNLINE_* variables from the outer environment out of settings."""
    for name in list(os.environ):
        if name.startswith("RUNLINE_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def system_settings():
    return AnsibleSettings(_env_file=None)


@pytest.fixture
def base_env():
    return {"PATH": "/usr/bin:/bin"}
