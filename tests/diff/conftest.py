"""Shared fixtures and utilities for diff tests."""

import pytest


@pytest.fixture
def kinds():
    """Return a helper that reduces diff entries to their kinds."""
    def _kinds(entries):
        return [entry.kind for entry in entries]

    return _kinds
