from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rampart.context import Context  # noqa: E402


@pytest.fixture
def ctx() -> Context:
    """Default floor, pinned to a year before every cutover in the tables."""
    return Context(year=2023)


@pytest.fixture
def ctx_2030() -> Context:
    return Context(year=2030)
