from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the user data directory and DIRSPACE_* environment.
3. Shared namespace engine fixtures.
"""

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirspace.core.namespace.engine import NamespaceEngine  # noqa: E402
from dirspace.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Environment Isolation
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the user data directory at a temporary folder for every test."""
    home = tmp_path / "dirspace_home"
    monkeypatch.setenv("DIRSPACE_HOME", str(home))
    for name in ("DIRSPACE_HOST", "DIRSPACE_PORT", "DIRSPACE_API_URL", "DIRSPACE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield home
    shutdown_logging()


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def engine() -> NamespaceEngine:
    """Return an empty namespace engine."""
    return NamespaceEngine()


@pytest.fixture
def produce_engine(engine: NamespaceEngine) -> NamespaceEngine:
    """
    Return an engine holding a small produce hierarchy.

    Structure:
      fruits
        apples
          fuji
      grains
      vegetables
    """
    for path in ("fruits", "vegetables", "grains", "fruits/apples", "fruits/apples/fuji"):
        assert engine.create(path).ok
    return engine
