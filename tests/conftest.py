"""Pytest configuration helpers.

Ensure the project's `src/` directory is on `sys.path` so imports like
`from lookthrough...` work during test collection, and provide small
registry builders shared by the tests.
"""
from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    # Insert at front so tests prefer local package sources
    sys.path.insert(0, str(SRC))

from lookthrough.data_models.reference_tables import ReferenceTables, load_reference_tables  # noqa: E402
from lookthrough.data_models.security import Security  # noqa: E402
from lookthrough.services.security_registry_service import SecurityRegistry  # noqa: E402


@pytest.fixture
def tables() -> ReferenceTables:
    return load_reference_tables()


@pytest.fixture
def make_registry():
    """Build a sealed registry from keyword dicts, e.g. make_registry(A={"sector": {...}})."""

    def _make(**securities) -> SecurityRegistry:
        registry = SecurityRegistry(Security(isin=isin, **fields) for isin, fields in securities.items())
        registry.seal()
        return registry

    return _make
