"""Shared test fixtures for tourreg.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import io

import pytest
from rich.console import Console

from tourreg.cli.session import Session
from tourreg.config import Settings
from tourreg.service import OperatorRegistry


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "tourreg"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def registry() -> OperatorRegistry:
    """Return a new empty registry."""
    return OperatorRegistry()


@pytest.fixture()
def seeded_registry() -> OperatorRegistry:
    """Return a registry with two Auckland operators and one in Wellington.

    Operators and activities:

    * ``AT-AKL-001`` Adventure Tours: ``AT-AKL-001-001`` Bungee Jump
      (Adventure), ``AT-AKL-001-002`` Harbour Cruise (Scenic)
    * ``KKT-AKL-002`` Kiwi Kai Trails: ``KKT-AKL-002-001`` Night Market (Food)
    * ``CW-WLG-001`` Capital Walks: no activities
    """
    reg = OperatorRegistry()
    reg.create_operator("Adventure Tours", "AKL")
    reg.create_operator("Kiwi Kai Trails", "Auckland")
    reg.create_operator("Capital Walks", "WLG")
    reg.create_activity("Bungee Jump", "Adventure", "AT-AKL-001")
    reg.create_activity("Harbour Cruise", "Scenic", "AT-AKL-001")
    reg.create_activity("Night Market", "Food", "KKT-AKL-002")
    return reg


@pytest.fixture()
def output() -> io.StringIO:
    """Return the buffer the ``session`` fixture prints to."""
    return io.StringIO()


@pytest.fixture()
def session(output: io.StringIO) -> Session:
    """Return a session on an empty registry printing plain text to ``output``."""
    console = Console(file=output, width=200, color_system=None)
    return Session(console, settings=Settings(color=False))
