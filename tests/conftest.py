"""Shared test fixtures.

Every test runs in an empty working directory with no BLOCKQUOTE_*
variables set, so a developer's .env or shell never leaks into settings.
Root logger state is restored after each test because the CLI reconfigures
it.
"""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path, monkeypatch):
    """Run each test from a clean directory with no BLOCKQUOTE_* variables."""
    for name in list(os.environ):
        if name.upper().startswith("BLOCKQUOTE_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
