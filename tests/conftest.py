"""Pytest configuration.

Ensures `import nldate` works when running `pytest` from a checkout without installing the package,
and provides the fixed reference instant every relative expression is resolved against.
"""

from __future__ import annotations

import sys
from datetime import UTC, datetime
from pathlib import Path

import pytest

# Ensure `import nldate...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

# A Wednesday.
REFERENCE_NOW = datetime(2025, 1, 15, 10, 20, 30, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    return REFERENCE_NOW
