"""
Integration test fixtures.

Provides a helper for running the CLI with scripted stdin.
"""

from __future__ import annotations

import io

import pytest


@pytest.fixture
def scripted_stdin(monkeypatch):
    """Feed the given lines to input() calls."""
    def _feed(*lines: str):
        monkeypatch.setattr('sys.stdin', io.StringIO("".join(f"{line}\n" for line in lines)))
    return _feed
