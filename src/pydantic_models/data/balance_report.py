from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel

from .accumulator_state import AccumulatorState
from .banner_data import BannerData
from .banner_line import BannerLine
from .row_balance import RowBalance


class BalanceReport(BaseModel):
    """
    Ergebnis eines Laufs: Endstand, Hochrechnung, Bannerzeilen und Saldo-Spalte.
    """
    state: AccumulatorState
    banner_data: BannerData
    lines: List[BannerLine]
    row_balances: List[Optional[RowBalance]]
