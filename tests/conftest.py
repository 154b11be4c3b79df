"""Shared pytest configuration for the zeitsaldo test suite."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# ``src`` enthält die Pakete shared_modules, pydantic_models und zeitsaldo.
SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from pydantic_models.config.balance_config import BalanceConfig  # noqa: E402


@pytest.fixture
def balance_config() -> BalanceConfig:
    return BalanceConfig()


class FakeRow:
    """Tageszeile für Tests; liest Zellen aus einem Dict."""

    def __init__(self, schedule=None, actual=None, contracted=None, **extra):
        self.cells = dict(extra)
        if schedule is not None:
            self.cells["SCHEDULE"] = schedule
        if actual is not None:
            self.cells["ALL_WORK_MINUTE"] = actual
        if contracted is not None:
            self.cells["FIXED_WORK_MINUTE"] = contracted

    def value(self, column_key):
        return self.cells.get(column_key)


@pytest.fixture
def make_row():
    return FakeRow

