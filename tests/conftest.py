"""Shared pytest fixtures for the nk_message test suite."""

from __future__ import annotations

import os
from datetime import datetime

import pytest

FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def fake_lookups() -> dict:
    """Keyword arguments that replace the host and user lookups."""
    return {"user_func": lambda: "alice", "host_func": lambda: "box1"}


@pytest.fixture()
def clean_env(monkeypatch):
    """Remove NK_MESSAGE_* variables so configuration defaults apply."""
    for key in list(os.environ):
        if key.startswith("NK_MESSAGE_"):
            monkeypatch.delenv(key)
