# tests/conftest.py
"""
Root conftest - test tiers and logging hygiene.

Test Tiers:
- tier1: pure logic, no filesystem (glob matching, flags, identities)
         Run: pytest -m tier1
- tier2: tests using a temporary classes directory or the CLI
         Run: pytest -m "tier1 or tier2"
"""

from __future__ import annotations

import logging

import pytest

TIER1_PATTERNS = ["test_glob_pattern", "test_artifacts", "test_outcomes"]


def pytest_configure(config):
    config.addinivalue_line("markers", "tier1: pure logic tests with no I/O")
    config.addinivalue_line("markers", "tier2: tests using the filesystem or the CLI")


def pytest_collection_modifyitems(items):
    """Mark tests tier1 or tier2 based on their module name."""
    for item in items:
        module = item.nodeid.split("::", 1)[0]
        if any(pattern in module for pattern in TIER1_PATTERNS):
            item.add_marker(pytest.mark.tier1)
        else:
            item.add_marker(pytest.mark.tier2)


@pytest.fixture(autouse=True)
def restore_root_log_level():
    """CLI commands reconfigure the root logger; undo it after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
