"""Pytest fixtures for prompt_choices tests."""

import os

import pytest

from prompt_choices.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def clear_env_overrides(monkeypatch: pytest.MonkeyPatch):
    """Remove PROMPT_CHOICES_* env vars so options start from defaults."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    yield


@pytest.fixture
def fixture_names() -> list[str]:
    return ["foo", "bar", "baz"]
