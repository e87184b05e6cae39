"""Pytest fixtures for weezard tests."""

import io

import pytest
from rich.console import Console

from weezard import config


@pytest.fixture(autouse=True)
def default_template(monkeypatch):
    """Start every test from the default template, without env overrides."""
    monkeypatch.delenv(config.TEMPLATE_ENV_VAR, raising=False)
    config.reset_template()
    yield
    config.reset_template()


@pytest.fixture
def out():
    """Plain (no colour) console writing to a buffer."""
    buf = io.StringIO()
    return Console(file=buf, force_terminal=False, color_system=None, width=200)

