from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field

class AccumulatorState(BaseModel):
    """
    Zwischenstand bzw. Endstand des Saldo-Durchlaufs über alle Tageszeilen.

    Attribute:
        cumulative_diff (float): Summe (Ist - Sollzeit pro Tag) über abgeschlossene Arbeitstage.
        overtime_diff (float): Summe (Ist - vertragliche Zeit) über abgeschlossene Arbeitstage.
        remaining_days (int): Anzahl künftiger, noch nicht erfasster Arbeitstage.
        row_balances (List[Optional[float]]): Laufender Saldo nach jeder Zeile,
            None für Zeilen ohne abgeschlossenen Arbeitstag.
    """
    cumulative_diff: float = 0.0
    overtime_diff: float = 0.0
    remaining_days: int = Field(default=0, ge=0)
    row_balances: List[Optional[float]] = Field(default_factory=list)
